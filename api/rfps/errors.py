from app.errors import DomainError


class NoDocumentContentError(DomainError):
    code = 'no_document'
    key = 'errors.rfps.no_document'


class UnsupportedFileError(DomainError):
    code = 'unsupported_file'
    key = 'errors.rfps.unsupported_file'


class FileTooLargeError(DomainError):
    code = 'file_too_large'
    status = 413
    key = 'errors.rfps.file_too_large'


class EmptyExtractionError(DomainError):
    code = 'empty_extraction'
    status = 422
    key = 'errors.rfps.empty_extraction'
