"""Билдер payload: копит поля, проверяет обязательные в `build()`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from pydantic import ValidationError

from openai_binding.errors import ConstructionError, InvalidFieldError, MissingFieldError

if TYPE_CHECKING:
    from openai_binding.api.base import ApiRequest

RequestT = TypeVar("RequestT", bound="ApiRequest")


def construction_error(request: str, exc: ValidationError) -> ConstructionError:
    """Переводит ошибку pydantic в ConstructionError (missing важнее invalid)."""
    errors = exc.errors()
    missing = [e for e in errors if e["type"] == "missing"]
    err = missing[0] if missing else errors[0]
    field = str(err["loc"][0]) if err["loc"] else "?"
    if missing:
        return MissingFieldError(field, request)
    return InvalidFieldError(field, request, err["msg"])


class RequestBuilder(Generic[RequestT]):
    """Пошаговая сборка запроса.

    На каждое поле payload есть сеттер с тем же именем, сеттеры чейнятся:

        ClassificationRequest.builder().model(Model.CURIE).query("hi").build()

    Билдер не "съедается" при `build()`: повторный вызов без изменений даёт
    равный payload.
    """

    def __init__(self, request_cls: type[RequestT]) -> None:
        self._request_cls = request_cls
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], RequestBuilder[RequestT]]:
        if name.startswith("_") or name not in self._request_cls.model_fields:
            raise AttributeError(f"{type(self).__name__} has no setter `{name}`")

        def setter(value: Any) -> RequestBuilder[RequestT]:
            self._values[name] = value
            return self

        return setter

    def set(self, **values: Any) -> RequestBuilder[RequestT]:
        """Задаёт несколько полей разом."""
        for name, value in values.items():
            getattr(self, name)(value)
        return self

    def build(self) -> RequestT:
        """Возвращает неизменяемый payload или кидает ConstructionError."""
        name = self._request_cls.__name__
        for field_name, info in self._request_cls.model_fields.items():
            if info.is_required() and self._values.get(field_name) is None:
                raise MissingFieldError(field_name, name)
        return self._request_cls(**self._values)
