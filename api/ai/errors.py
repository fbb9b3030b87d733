from app.errors import DomainError


class PromptRejectedError(DomainError):
    code = 'prompt_rejected'
    status = 422
    key = 'errors.ai.prompt_rejected'


class ProviderError(DomainError):
    code = 'provider_failed'
    status = 502
    key = 'errors.ai.provider_failed'

