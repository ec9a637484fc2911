from collections.abc import Callable

import httpx
import pytest

from openai_binding.client import AsyncClient, Client

BASE_URL = "https://api.test/v1"
API_KEY = "sk-test"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Callable[[Handler], Client]:
    def factory(handler: Handler, **kwargs: object) -> Client:
        http = httpx.Client(transport=httpx.MockTransport(handler))
        return Client(API_KEY, base_url=BASE_URL, http_client=http, **kwargs)

    return factory


@pytest.fixture
def make_async_client() -> Callable[[Handler], AsyncClient]:
    def factory(handler: Handler, **kwargs: object) -> AsyncClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return AsyncClient(API_KEY, base_url=BASE_URL, http_client=http, **kwargs)

    return factory
