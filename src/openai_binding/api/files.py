"""Файлы: список, загрузка, метаданные, удаление, содержимое."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ConfigDict, Field, RootModel

from openai_binding.api.base import ApiRequest, ApiResponse

if TYPE_CHECKING:
    from openai_binding.client import BaseClient


def _files_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/files"


class FileObject(ApiResponse):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: str | None = None
    status_details: Any | None = None


class FileList(ApiResponse):
    object: str
    data: list[FileObject]


class FileDeleted(ApiResponse):
    id: str
    object: str
    deleted: bool


class FileContent(RootModel[str]):
    """Содержимое файла: всё тело ответа целиком, без JSON-обёртки."""

    model_config = ConfigDict(frozen=True)

    @property
    def content(self) -> str:
        return self.root


class FileListRequest(ApiRequest[FileList]):
    method = "GET"
    response_type = FileList

    def url(self, base_url: str) -> str:
        return _files_url(base_url)


class FileUploadRequest(ApiRequest[FileObject]):
    """Загрузка файла (multipart: `purpose` + `file`).

    `purpose` для примеров classifications/answers: `"classifications"` /
    `"answers"`, формат файла JSON Lines.
    """

    response_type = FileObject

    file: bytes
    filename: str = Field(min_length=1)
    purpose: str = Field(min_length=1)

    @classmethod
    def from_path(cls, path: str | Path, purpose: str) -> FileUploadRequest:
        p = Path(path)
        return cls(file=p.read_bytes(), filename=p.name, purpose=purpose)

    def url(self, base_url: str) -> str:
        return _files_url(base_url)

    def body(self) -> dict | None:
        # Тело multipart, см. build_request.
        return None

    def build_request(self, client: BaseClient) -> httpx.Request:
        return client.http.build_request(
            self.method,
            self.url(client.base_url),
            data={"purpose": self.purpose},
            files={"file": (self.filename, self.file)},
            headers=client.headers,
        )


class FileRetrieveRequest(ApiRequest[FileObject]):
    method = "GET"
    response_type = FileObject

    file_id: str = Field(min_length=1)

    def url(self, base_url: str) -> str:
        return f"{_files_url(base_url)}/{self.file_id}"


class FileDeleteRequest(ApiRequest[FileDeleted]):
    method = "DELETE"
    response_type = FileDeleted

    file_id: str = Field(min_length=1)

    def url(self, base_url: str) -> str:
        return f"{_files_url(base_url)}/{self.file_id}"


class FileContentRequest(ApiRequest[FileContent]):
    method = "GET"
    response_type = FileContent

    file_id: str = Field(min_length=1)

    def url(self, base_url: str) -> str:
        return f"{_files_url(base_url)}/{self.file_id}/content"

    def parse_response(self, response: httpx.Response) -> FileContent:
        return self._validate(response.text, response)
