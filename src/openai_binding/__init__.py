"""Типизированный клиент для completions/classifications/answers/files API."""

import logging

__version__ = "0.1.0"

# Логи библиотеки уходят в `openai_binding.*`; куда писать, решает приложение.
logging.getLogger(__name__).addHandler(logging.NullHandler())

from openai_binding.client import AsyncClient, Client  # noqa: E402
from openai_binding.model import Model  # noqa: E402

__all__ = ["AsyncClient", "Client", "Model", "__version__"]
