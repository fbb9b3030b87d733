from app.errors import DomainError


class InvalidExportFormatError(DomainError):
    code = 'invalid_format'
    key = 'errors.exports.invalid_format'
