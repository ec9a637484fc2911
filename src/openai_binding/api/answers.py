"""Ответ на вопрос по документам и примерам (`POST /answers`).

Документы передаются либо списком (`documents`), либо файлом (`file`).
Как и в classifications, взаимоисключение не проверяется.
"""

from __future__ import annotations

from pydantic import Field

from openai_binding.api.base import ApiRequest, ApiResponse
from openai_binding.api.common import ExampleRows, StrList
from openai_binding.model import Model


class SelectedDocument(ApiResponse):
    document: int
    text: str


class AnswersResponse(ApiResponse):
    answers: list[str]
    completion: str
    model: str
    object: str
    search_model: str
    selected_documents: list[SelectedDocument]
    prompt: str | None = None


class AnswersRequest(ApiRequest[AnswersResponse]):
    response_type = AnswersResponse

    model: Model
    question: str
    examples: ExampleRows
    examples_context: str
    documents: StrList | None = None
    file: str | None = None
    search_model: Model | None = None
    max_rerank: int | None = Field(default=None, ge=1)
    temperature: float | None = None
    logprobs: int | None = Field(default=None, ge=0)
    max_tokens: int | None = Field(default=None, ge=0)
    stop: StrList | None = None
    n: int | None = Field(default=None, ge=1)
    logit_bias: dict[str, int] | None = None
    return_metadata: bool | None = None
    return_prompt: bool | None = None
    expand: StrList | None = None
    user: str | None = None

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/answers"
