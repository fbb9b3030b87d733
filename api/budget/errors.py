from app.errors import DomainError


class BudgetError(DomainError):
    code = 'budget_error'


class InvalidHoursError(BudgetError):
    code = 'invalid_hours'
    key = 'errors.budget.invalid_hours'


class InvalidYearError(InvalidHoursError):
    code = 'invalid_year'
    key = 'errors.budget.invalid_year'


class InvalidRateError(InvalidHoursError):
    code = 'invalid_rate'
    key = 'errors.budget.invalid_rate'


class DuplicatePersonError(BudgetError):
    code = 'duplicate_person'
    status = 409
    key = 'errors.budget.duplicate_person'


class PersonNotFoundError(BudgetError):
    code = 'person_not_found'
    status = 404
    key = 'errors.budget.person_not_found'


class RowNotFoundError(BudgetError):
    code = 'row_not_found'
    status = 404
    key = 'errors.budget.row_not_found'
