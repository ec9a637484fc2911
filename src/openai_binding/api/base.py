"""Контракт запроса: URL, метод, тело, разбор ответа.

Каждый тип payload реализует его один раз, а клиент исполняет любой
`ApiRequest` одним и тем же `execute()` (sync или async).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from openai_binding.api.builder import RequestBuilder, construction_error
from openai_binding.errors import DeserializationError

if TYPE_CHECKING:
    from openai_binding.client import BaseClient

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ApiResponse(BaseModel):
    """Базовый ответ: только из десериализации, после этого read-only."""

    model_config = ConfigDict(frozen=True)


class ApiRequest(BaseModel, Generic[ResponseT]):
    """Базовый payload.

    Подкласс задаёт `method`, `response_type` и `url()`. Поля, которые идут
    только в путь (например `file_id`), перечисляются в `body_exclude`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: ClassVar[str] = "POST"
    response_type: ClassVar[type[BaseModel]]
    body_exclude: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise construction_error(type(self).__name__, e) from e

    @classmethod
    def builder(cls) -> RequestBuilder[Any]:
        return RequestBuilder(cls)

    def with_options(self, **fields: Any) -> ApiRequest[ResponseT]:
        """Новый payload с дополнительными полями (исходный не меняется)."""
        values = {name: getattr(self, name) for name in self.model_fields_set}
        values.update(fields)
        return type(self)(**values)

    def url(self, base_url: str) -> str:
        raise NotImplementedError

    def body(self) -> dict | None:
        """JSON-тело: только заданные поля, без None. У GET/DELETE тела нет."""
        if self.method in ("GET", "DELETE"):
            return None
        return self.model_dump(
            mode="json",
            exclude_unset=True,
            exclude_none=True,
            exclude=set(self.body_exclude),
        )

    def build_request(self, client: BaseClient) -> httpx.Request:
        return client.http.build_request(
            self.method,
            self.url(client.base_url),
            json=self.body(),
            headers=client.headers,
        )

    def parse_response(self, response: httpx.Response) -> ResponseT:
        """Разбирает 2xx-ответ. Non-2xx сюда не доходят (их режет клиент)."""
        try:
            data = response.json()
        except ValueError as e:
            raise DeserializationError(
                f"{type(self).__name__}: response body is not valid JSON",
                status_code=response.status_code,
                body=response.text,
            ) from e
        return self._validate(data, response)

    def _validate(self, data: Any, response: httpx.Response) -> ResponseT:
        try:
            return self.response_type.model_validate(data)  # type: ignore[return-value]
        except ValidationError as e:
            raise DeserializationError(
                f"{type(self).__name__}: unexpected response shape: {e.error_count()} error(s)",
                status_code=response.status_code,
                body=response.text,
            ) from e
