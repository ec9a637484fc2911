from openai_binding.api.answers import AnswersRequest
from openai_binding.api.classifications import ClassificationRequest
from openai_binding.api.completions import CompletionRequest
from openai_binding.api.files import (
    FileContentRequest,
    FileDeleteRequest,
    FileListRequest,
    FileRetrieveRequest,
)
from openai_binding.model import Model

BASE = "https://api.test/v1"


def test_classification_body_has_only_set_fields() -> None:
    request = ClassificationRequest.builder().model(Model.CURIE).query("It is a rainy day :(").build()
    assert request.body() == {"model": "curie", "query": "It is a rainy day :("}


def test_classification_body_includes_optional_fields_once_set() -> None:
    request = (
        ClassificationRequest.builder()
        .model(Model.CURIE)
        .search_model(Model.ADA)
        .query("q")
        .labels(["Positive", "Negative"])
        .logit_bias({"50256": -100})
        .return_prompt(False)
        .build()
    )
    body = request.body()
    assert body["search_model"] == "ada"
    assert body["labels"] == ["Positive", "Negative"]
    assert body["logit_bias"] == {"50256": -100}
    # False задано явно, поэтому отправляется.
    assert body["return_prompt"] is False
    for key in ("examples", "file", "temperature", "logprobs", "max_examples", "expand", "user"):
        assert key not in body


def test_explicit_none_is_omitted() -> None:
    request = ClassificationRequest(model=Model.ADA, query="q", user=None)
    assert "user" not in request.body()


def test_completion_model_goes_to_url_not_body() -> None:
    request = CompletionRequest(model=Model.DAVINCI, prompt="Say this is a test", max_tokens=7)
    assert request.url(BASE) == f"{BASE}/engines/text-davinci-002/completions"
    assert request.body() == {"prompt": "Say this is a test", "max_tokens": 7}


def test_completion_stop_accepts_single_string() -> None:
    request = CompletionRequest(model=Model.ADA, prompt="p", stop="\n")
    assert request.body()["stop"] == ["\n"]


def test_answers_body() -> None:
    request = AnswersRequest(
        model=Model.CURIE,
        question="which puppy is happy?",
        examples=[["What is human life expectancy?", "78 years."]],
        examples_context="In 2017, U.S. life expectancy was 78.6 years.",
        documents=["Puppy A is happy.", "Puppy B is sad."],
    )
    assert request.url(BASE) == f"{BASE}/answers"
    assert request.body() == {
        "model": "curie",
        "question": "which puppy is happy?",
        "examples": [["What is human life expectancy?", "78 years."]],
        "examples_context": "In 2017, U.S. life expectancy was 78.6 years.",
        "documents": ["Puppy A is happy.", "Puppy B is sad."],
    }


def test_file_requests_urls_and_methods() -> None:
    assert FileListRequest().url(BASE) == f"{BASE}/files"
    assert FileListRequest.method == "GET"
    assert FileRetrieveRequest(file_id="file-1").url(BASE) == f"{BASE}/files/file-1"
    assert FileDeleteRequest(file_id="file-1").method == "DELETE"
    content = FileContentRequest(file_id="file-1")
    assert content.url(BASE) == f"{BASE}/files/file-1/content"
    assert content.method == "GET"


def test_read_and_delete_requests_have_no_body() -> None:
    assert FileListRequest().body() is None
    assert FileContentRequest(file_id="file-1").body() is None
    assert FileDeleteRequest(file_id="file-1").body() is None


def test_classification_url() -> None:
    request = ClassificationRequest(model=Model.ADA, query="q")
    assert request.url(BASE + "/") == f"{BASE}/classifications"
