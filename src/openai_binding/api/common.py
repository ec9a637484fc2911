"""Общие типы для нескольких эндпоинтов."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from openai_binding.api.base import ApiResponse


def as_list(value: Any) -> Any:
    """Одиночное значение → список из одного элемента (для labels/expand/stop)."""
    if isinstance(value, (str, bytes)):
        return [value]
    if isinstance(value, tuple):
        return list(value)
    return value


def as_example_rows(value: Any) -> Any:
    """Примеры `[[text, label], ...]`: кортежи тоже принимаем."""
    if isinstance(value, (list, tuple)):
        return [list(row) if isinstance(row, tuple) else row for row in value]
    return value


StrList = Annotated[list[str], BeforeValidator(as_list)]
# Каждая строка примера: ровно пара [text, label] (или [question, answer]).
ExampleRow = Annotated[list[str], Field(min_length=2, max_length=2)]
ExampleRows = Annotated[list[ExampleRow], BeforeValidator(as_example_rows)]


class LogProbs(ApiResponse):
    """Логвероятности выбранных токенов и top-N альтернатив."""

    tokens: list[str] = Field(default_factory=list)
    token_logprobs: list[float | None] = Field(default_factory=list)
    top_logprobs: list[dict[str, float] | None] | None = None
    text_offset: list[int] = Field(default_factory=list)


class Usage(ApiResponse):
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None
