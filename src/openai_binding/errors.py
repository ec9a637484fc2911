"""Ошибки клиента и их нормализация (стабильные kind/code/message).

Транспортные ошибки не оборачиваем: это `httpx.HTTPError` (сеть, TLS,
таймаут, non-2xx), они уходят вызывающему как есть.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx


class OpenAIBindingError(Exception):
    """Базовая ошибка библиотеки."""


class ConstructionError(OpenAIBindingError):
    """Payload не удалось собрать (до любого сетевого вызова)."""


class MissingFieldError(ConstructionError):
    """Не задано обязательное поле."""

    def __init__(self, field: str, request: str) -> None:
        super().__init__(f"{request}: missing required field `{field}`")
        self.field = field
        self.request = request


class InvalidFieldError(ConstructionError):
    """Значение поля не прошло валидацию."""

    def __init__(self, field: str, request: str, reason: str) -> None:
        super().__init__(f"{request}: invalid value for `{field}`: {reason}")
        self.field = field
        self.request = request
        self.reason = reason


class DeserializationError(OpenAIBindingError):
    """Сервис ответил 2xx, но тело не совпало с ожидаемой формой."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        # Обрезаем, чтобы не тащить мегабайты в логи.
        self.body = body[:500]


class ConfigurationError(OpenAIBindingError):
    """Клиент не настроен (нет ключа и т.п.)."""


@dataclass(frozen=True)
class ErrorInfo:
    """Стабильное описание ошибки для логов и CLI."""

    kind: str
    code: str
    message: str


def describe_exception(exc: BaseException) -> ErrorInfo:
    """Классифицирует исключение: construction / transport / deserialization / ..."""
    if isinstance(exc, MissingFieldError):
        return ErrorInfo(kind="construction", code="missing_field", message=str(exc))

    if isinstance(exc, InvalidFieldError):
        return ErrorInfo(kind="construction", code="invalid_field", message=str(exc))

    if isinstance(exc, ConfigurationError):
        return ErrorInfo(kind="configuration", code="not_configured", message=str(exc))

    if isinstance(exc, DeserializationError):
        return ErrorInfo(kind="deserialization", code="unexpected_response", message=str(exc))

    if isinstance(exc, httpx.TimeoutException):
        return ErrorInfo(kind="transport", code="timeout", message="Upstream did not respond in time")

    if isinstance(exc, httpx.HTTPStatusError):
        sc = int(getattr(exc.response, "status_code", 0) or 0)
        if 400 <= sc < 500:
            group = "http_4xx"
        elif sc >= 500:
            group = "http_5xx"
        else:
            group = "http_error"
        msg = f"Upstream returned {sc}" if sc else "Upstream returned an error"
        return ErrorInfo(kind="transport", code=group, message=msg)

    if isinstance(exc, httpx.TransportError):
        return ErrorInfo(kind="transport", code="unreachable", message="Could not connect to upstream")

    return ErrorInfo(kind="unknown", code="error", message=str(exc) or type(exc).__name__)
