import httpx

from openai_binding.errors import (
    ConfigurationError,
    DeserializationError,
    InvalidFieldError,
    MissingFieldError,
    describe_exception,
)


def test_describe_missing_field() -> None:
    info = describe_exception(MissingFieldError("query", "ClassificationRequest"))
    assert info.kind == "construction"
    assert info.code == "missing_field"
    assert "query" in info.message


def test_describe_invalid_field() -> None:
    info = describe_exception(InvalidFieldError("model", "ClassificationRequest", "bad enum"))
    assert info.kind == "construction"
    assert info.code == "invalid_field"


def test_describe_timeout() -> None:
    info = describe_exception(httpx.TimeoutException("timeout"))
    assert info.kind == "transport"
    assert info.code == "timeout"


def test_describe_connect_error() -> None:
    info = describe_exception(httpx.ConnectError("refused"))
    assert info.kind == "transport"
    assert info.code == "unreachable"


def test_describe_status_error_groups() -> None:
    request = httpx.Request("POST", "https://api.test/v1/classifications")
    for status, code in ((404, "http_4xx"), (503, "http_5xx")):
        response = httpx.Response(status, request=request)
        err = httpx.HTTPStatusError("boom", request=request, response=response)
        info = describe_exception(err)
        assert info.kind == "transport"
        assert info.code == code
        assert str(status) in info.message


def test_describe_deserialization_is_not_transport() -> None:
    info = describe_exception(DeserializationError("bad body", status_code=200, body="x"))
    assert info.kind == "deserialization"
    assert info.code == "unexpected_response"


def test_describe_configuration() -> None:
    info = describe_exception(ConfigurationError("OPENAI_API_KEY is required"))
    assert info.kind == "configuration"


def test_describe_unknown() -> None:
    info = describe_exception(KeyError("x"))
    assert info.kind == "unknown"


def test_deserialization_error_truncates_body() -> None:
    err = DeserializationError("bad", body="x" * 2000)
    assert len(err.body) == 500
