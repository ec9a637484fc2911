"""Типы запросов/ответов: по модулю на эндпоинт."""

from openai_binding.api.answers import AnswersRequest, AnswersResponse
from openai_binding.api.base import ApiRequest, ApiResponse
from openai_binding.api.builder import RequestBuilder
from openai_binding.api.classifications import ClassificationRequest, ClassificationResponse
from openai_binding.api.completions import CompletionRequest, CompletionResponse
from openai_binding.api.files import (
    FileContent,
    FileContentRequest,
    FileDeleted,
    FileDeleteRequest,
    FileList,
    FileListRequest,
    FileObject,
    FileRetrieveRequest,
    FileUploadRequest,
)

__all__ = [
    "AnswersRequest",
    "AnswersResponse",
    "ApiRequest",
    "ApiResponse",
    "ClassificationRequest",
    "ClassificationResponse",
    "CompletionRequest",
    "CompletionResponse",
    "FileContent",
    "FileContentRequest",
    "FileDeleteRequest",
    "FileDeleted",
    "FileList",
    "FileListRequest",
    "FileObject",
    "FileRetrieveRequest",
    "FileUploadRequest",
    "RequestBuilder",
]
