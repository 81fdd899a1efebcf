"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every failure the CLI reports is an ApplicationError; the underlying
exception, when there is one, is kept as ``__cause__``.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when user input fails validation."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class HeroMaskError(ValidationError):
    """Raised when a numeric hero mask is outside the allowed range."""


class UnknownHeroError(ValidationError):
    """Raised when a hero name is not in the hero table."""


class ExternalServiceError(ApplicationError):
    """Raised when an external service call fails."""

    def __init__(self, message: str = "External service error", code: str = "SYS_EXTERNAL_SERVICE_ERROR") -> None:
        super().__init__(message, code=code)


class NetworkError(ExternalServiceError):
    """Transport failure (connect, timeout, protocol) after all retries."""

    def __init__(self, message: str = "网络请求失败") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")


class HttpStatusError(ExternalServiceError):
    """Server kept answering with a non-2xx status after all retries."""

    def __init__(self, message: str = "请求超过最大重试次数", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="NET_HTTP_STATUS_ERROR")


class DecodeError(ApplicationError):
    """Raised when a payload cannot be decoded."""

    def __init__(self, message: str = "Decode failed", code: str = "DEC_DECODE_ERROR") -> None:
        super().__init__(message, code=code)


class ResponseDecodeError(DecodeError):
    """The response envelope is not valid JSON or has the wrong shape."""

    def __init__(self, message: str = "解析响应 JSON 失败") -> None:
        super().__init__(message, code="DEC_RESPONSE_ERROR")


class ConfigDecodeError(DecodeError):
    """The order's embedded config JSON is malformed."""

    def __init__(self, message: str = "config格式不正确") -> None:
        super().__init__(message, code="DEC_CONFIG_ERROR")


class StatsDecodeError(DecodeError):
    """The order's embedded dldata array is malformed or too short."""

    def __init__(self, message: str = "dldata格式不正确") -> None:
        super().__init__(message, code="DEC_STATS_ERROR")


class DomainError(ApplicationError):
    """The API answered, but not with what the operation required."""

    def __init__(self, message: str = "API error", code: str = "API_DOMAIN_ERROR") -> None:
        super().__init__(message, code=code)


class ApiCodeError(DomainError):
    """The envelope carried a non-success code."""

    def __init__(self, api_code: int, api_error: str) -> None:
        self.api_code = api_code
        self.api_error = api_error
        super().__init__(f"API错误({api_code}): {api_error}", code="API_CODE_ERROR")


class EmptyDataError(DomainError):
    """A successful envelope had no order records."""

    def __init__(self, message: str = "API返回空数据") -> None:
        super().__init__(message, code="API_EMPTY_DATA")


def error_chain(exc: BaseException) -> list[str]:
    """Return the message of ``exc`` followed by each cause, outermost first."""
    messages = []
    current: BaseException | None = exc
    while current is not None:
        text = str(current)
        if text:
            messages.append(text)
        current = current.__cause__ or (
            None if current.__suppress_context__ else current.__context__
        )
    return messages
