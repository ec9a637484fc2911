"""CLI утилита (разовые запросы к API из терминала)."""

import argparse
import sys

import httpx
from pydantic import BaseModel

from openai_binding.api.classifications import ClassificationRequest
from openai_binding.api.completions import CompletionRequest
from openai_binding.api.files import FileContentRequest, FileListRequest
from openai_binding.client import Client
from openai_binding.errors import OpenAIBindingError, describe_exception
from openai_binding.infrastructure.logging import configure_logging
from openai_binding.model import Model


def _print_response(response: BaseModel) -> None:
    print(response.model_dump_json(indent=2, exclude_none=True))


def cmd_classify(client: Client, args: argparse.Namespace) -> BaseModel:
    """Классифицирует `--query` по примерам `--example "text=label"`."""
    builder = ClassificationRequest.builder().model(Model(args.model)).query(args.query)
    if args.example:
        builder.examples([e.rsplit("=", 1) for e in args.example])
    if args.file:
        builder.file(args.file)
    if args.label:
        builder.labels(args.label)
    if args.search_model:
        builder.search_model(Model(args.search_model))
    return client.execute(builder.build())


def cmd_complete(client: Client, args: argparse.Namespace) -> BaseModel:
    """Дополняет `--prompt` выбранной моделью."""
    builder = CompletionRequest.builder().model(Model(args.model)).prompt(args.prompt)
    if args.max_tokens is not None:
        builder.max_tokens(args.max_tokens)
    if args.temperature is not None:
        builder.temperature(args.temperature)
    return client.execute(builder.build())


def cmd_files(client: Client, args: argparse.Namespace) -> BaseModel:
    return client.execute(FileListRequest())


def cmd_file_content(client: Client, args: argparse.Namespace) -> BaseModel:
    response = client.execute(FileContentRequest(file_id=args.file_id))
    # Содержимое печатаем как есть, без JSON.
    sys.stdout.write(response.content)
    return response


def main(argv: list[str] | None = None, client: Client | None = None) -> int:
    """Точка входа CLI."""
    parser = argparse.ArgumentParser(prog="openai-binding", description="OpenAI binding: CLI")
    parser.add_argument("--log-level", default=None, help="Уровень логов (иначе LOG_LEVEL)")
    sub = parser.add_subparsers(dest="cmd", required=True)
    models = [m.value for m in Model]

    p_classify = sub.add_parser("classify", help="Классифицировать запрос")
    p_classify.add_argument("--model", choices=models, default=Model.CURIE.value)
    p_classify.add_argument("--search-model", choices=models, default=None)
    p_classify.add_argument("--query", required=True, help="Текст для классификации")
    p_classify.add_argument(
        "--example",
        action="append",
        default=[],
        help="Размеченный пример `text=label` (можно несколько раз)",
    )
    p_classify.add_argument("--file", default=None, help="ID загруженного файла с примерами")
    p_classify.add_argument("--label", action="append", default=[], help="Допустимая метка")
    p_classify.set_defaults(func=cmd_classify, print_json=True)

    p_complete = sub.add_parser("complete", help="Дополнить текст")
    p_complete.add_argument("--model", choices=models, default=Model.DAVINCI.value)
    p_complete.add_argument("--prompt", required=True)
    p_complete.add_argument("--max-tokens", type=int, default=None)
    p_complete.add_argument("--temperature", type=float, default=None)
    p_complete.set_defaults(func=cmd_complete, print_json=True)

    p_files = sub.add_parser("files", help="Список загруженных файлов")
    p_files.set_defaults(func=cmd_files, print_json=True)

    p_content = sub.add_parser("file-content", help="Содержимое файла")
    p_content.add_argument("file_id")
    p_content.set_defaults(func=cmd_file_content, print_json=False)

    args = parser.parse_args(argv)
    if args.cmd == "classify":
        bad = [e for e in args.example if "=" not in e]
        if bad:
            parser.error(f"--example must look like `text=label`, got: {bad[0]!r}")
    configure_logging(args.log_level)

    own_client = client is None
    try:
        if client is None:
            client = Client.from_settings()
        response = args.func(client, args)
    except (OpenAIBindingError, httpx.HTTPError) as e:
        info = describe_exception(e)
        print(f"error: {info.kind}/{info.code}: {info.message}", file=sys.stderr)
        return 1
    finally:
        if own_client and client is not None:
            client.close()

    if args.print_json:
        _print_response(response)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
