from app.errors import DomainError


class ReviewAlreadyDecidedError(DomainError):
    code = 'review_decided'
    status = 409
    key = 'errors.reviews.already_decided'


class InvalidReviewStatusError(DomainError):
    code = 'invalid_review_status'
    key = 'errors.reviews.invalid_status'
