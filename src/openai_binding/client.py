"""Клиент: ключ + HTTP-транспорт, один `execute()` на все запросы.

`Client` блокирующий (httpx.Client), `AsyncClient` неблокирующий
(httpx.AsyncClient). Контракт одинаковый, режим выбирается классом.
Ретраев, лимитов и кэша нет: любая ошибка сразу уходит вызывающему.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from openai_binding.api.base import ApiRequest
from openai_binding.errors import ConfigurationError, describe_exception
from openai_binding.settings import DEFAULT_BASE_URL, Settings, get_settings

# Пишем через stdlib-логгер `openai_binding.*`: без настройки у приложения
# (NullHandler в __init__) библиотека молчит.
log = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _encode_header_value(value: str) -> str | bytes:
    """Кодирует заголовок в ASCII или UTF-8 (байты), если там есть не-ASCII."""
    try:
        value.encode("ascii")
        return value
    except UnicodeEncodeError:
        return value.encode("utf-8")


def _settings_kwargs(settings: Settings | None) -> dict[str, Any]:
    settings = settings or get_settings()
    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY is required")
    return {
        "api_key": settings.openai_api_key,
        "base_url": settings.openai_base_url,
        "timeout": settings.openai_timeout_seconds,
        "organization": settings.openai_organization,
    }


class BaseClient:
    """Общая часть sync/async клиента. После конструктора не меняется."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        organization: str | None = None,
        logger: Any | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("api_key must not be empty")
        self._base_url = base_url.rstrip("/")
        self._headers: dict[str, str | bytes] = {"Authorization": f"Bearer {api_key}"}
        if organization:
            self._headers["OpenAI-Organization"] = _encode_header_value(organization)
        self._log = logger if logger is not None else log

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str | bytes]:
        return dict(self._headers)

    @property
    def http(self) -> httpx.Client | httpx.AsyncClient:
        raise NotImplementedError

    def _prepare(self, request: ApiRequest[Any]) -> httpx.Request:
        http_request = request.build_request(self)
        self._log.debug(
            "api_request",
            request=type(request).__name__,
            method=http_request.method,
            url=str(http_request.url),
        )
        return http_request

    def _log_error(self, request: ApiRequest[Any], exc: Exception) -> None:
        info = describe_exception(exc)
        self._log.warning(
            "api_error",
            request=type(request).__name__,
            kind=info.kind,
            code=info.code,
            err=str(exc),
        )


class Client(BaseClient):
    """Блокирующий клиент."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        organization: str | None = None,
        http_client: httpx.Client | None = None,
        logger: Any | None = None,
    ) -> None:
        super().__init__(api_key, base_url=base_url, organization=organization, logger=logger)
        self._http = http_client or httpx.Client(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> Client:
        """Собирает клиента из `OPENAI_*` env/.env."""
        return cls(**{**_settings_kwargs(settings), **kwargs})

    @property
    def http(self) -> httpx.Client:
        return self._http

    def execute(self, request: ApiRequest[ResponseT]) -> ResponseT:
        """Исполняет запрос и возвращает типизированный ответ.

        Ошибки сети и non-2xx: `httpx.HTTPError` (как есть).
        Кривое тело 2xx-ответа: `DeserializationError`.
        """
        http_request = self._prepare(request)
        try:
            response = self._http.send(http_request)
            response.raise_for_status()
            return request.parse_response(response)
        except Exception as e:
            self._log_error(request, e)
            raise

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncClient(BaseClient):
    """Неблокирующий клиент (каждый вызов ждёт только своего I/O)."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        organization: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        logger: Any | None = None,
    ) -> None:
        super().__init__(api_key, base_url=base_url, organization=organization, logger=logger)
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> AsyncClient:
        return cls(**{**_settings_kwargs(settings), **kwargs})

    @property
    def http(self) -> httpx.AsyncClient:
        return self._http

    async def execute(self, request: ApiRequest[ResponseT]) -> ResponseT:
        """Async-версия `Client.execute` с теми же ошибками."""
        http_request = self._prepare(request)
        try:
            response = await self._http.send(http_request)
            response.raise_for_status()
            return request.parse_response(response)
        except Exception as e:
            self._log_error(request, e)
            raise

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> AsyncClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
