from app.errors import DomainError


class SectionError(DomainError):
    code = 'section_error'


class SectionLockedError(SectionError):
    code = 'section_locked'
    status = 403
    key = 'errors.sections.locked'


class AlreadyLockedError(SectionError):
    code = 'already_locked'
    status = 409
    key = 'errors.sections.already_locked'


class ManagerRequiredError(SectionError):
    code = 'manager_required'
    status = 403
    key = 'errors.sections.manager_required'


class SectionNotAssignedError(SectionError):
    code = 'not_assigned'
    status = 403
    key = 'errors.sections.not_assigned'


class StaleSectionError(SectionError):
    code = 'stale_section'
    status = 409
    key = 'errors.sections.stale'


class SectionNotFoundError(SectionError):
    code = 'section_not_found'
    status = 404
    key = 'errors.sections.not_found'


class NoResponseContentError(DomainError):
    code = 'no_content'
    key = 'errors.responses.no_content'
