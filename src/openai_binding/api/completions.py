"""Дополнение текста (`POST /engines/{engine}/completions`).

Модель выбирает URL и в тело не попадает. Обязательные поля: `model`, `prompt`.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from openai_binding.api.base import ApiRequest, ApiResponse
from openai_binding.api.common import LogProbs, StrList, Usage
from openai_binding.model import Model


class CompletionChoice(ApiResponse):
    text: str
    index: int
    logprobs: LogProbs | None = None
    finish_reason: str | None = None


class CompletionResponse(ApiResponse):
    id: str
    object: str
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: Usage | None = None

    @property
    def text(self) -> str:
        """Текст первого варианта (пусто, если вариантов нет)."""
        return self.choices[0].text if self.choices else ""


class CompletionRequest(ApiRequest[CompletionResponse]):
    response_type = CompletionResponse
    body_exclude: ClassVar[frozenset[str]] = frozenset({"model"})

    model: Model
    prompt: str | list[str]
    suffix: str | None = None
    max_tokens: int | None = Field(default=None, ge=0)
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = Field(default=None, ge=1)
    logprobs: int | None = Field(default=None, ge=0)
    echo: bool | None = None
    stop: StrList | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    best_of: int | None = Field(default=None, ge=1)
    logit_bias: dict[str, int] | None = None
    user: str | None = None

    def url(self, base_url: str) -> str:
        return self.model.url(base_url, "/completions")
