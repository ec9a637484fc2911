"""Классификация запроса по размеченным примерам (`POST /classifications`).

Эндпоинт сначала ищет среди примеров самые близкие к запросу (search_model),
потом собирает из них промпт и получает метку через completions.
Примеры передаются либо списком (`examples`), либо ссылкой на загруженный
файл (`file`), но не одновременно. Взаимоисключение здесь НЕ проверяется:
upstream сам вернёт 4xx.

    request = (
        ClassificationRequest.builder()
        .model(Model.CURIE)
        .search_model(Model.ADA)
        .query("It is a rainy day :(")
        .examples([["A happy moment", "Positive"], ["I am sad.", "Negative"]])
        .labels(["Positive", "Negative", "Neutral"])
        .build()
    )

Обязательные поля: `model`, `query`.
"""

from __future__ import annotations

from pydantic import Field

from openai_binding.api.base import ApiRequest, ApiResponse
from openai_binding.api.common import ExampleRows, LogProbs, StrList
from openai_binding.model import Model


class SelectedExample(ApiResponse):
    document: int
    label: str
    text: str
    logprobs: LogProbs | None = None


class ClassificationResponse(ApiResponse):
    completion: str
    label: str
    model: str
    object: str
    search_model: str
    selected_examples: list[SelectedExample]
    # Только при return_prompt=true.
    prompt: str | None = None


class ClassificationRequest(ApiRequest[ClassificationResponse]):
    response_type = ClassificationResponse

    model: Model
    query: str
    examples: ExampleRows | None = None
    file: str | None = None
    labels: StrList | None = None
    search_model: Model | None = None
    temperature: float | None = None
    logprobs: int | None = Field(default=None, ge=0)
    max_examples: int | None = Field(default=None, ge=0)
    logit_bias: dict[str, int] | None = None
    return_prompt: bool | None = None
    return_metadata: bool | None = None
    expand: StrList | None = None
    user: str | None = None

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/classifications"
