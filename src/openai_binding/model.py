"""Реестр моделей: имя → engine во URL upstream."""

from __future__ import annotations

from enum import Enum


class Model(str, Enum):
    """Закрытый набор моделей. На проводе сериализуется как lowercase-имя."""

    ADA = "ada"
    BABBAGE = "babbage"
    CURIE = "curie"
    DAVINCI = "davinci"

    @property
    def engine(self) -> str:
        return _ENGINES[self]

    def url(self, base_url: str, action: str = "") -> str:
        """`{base}/engines/{engine}` + action (например `/completions`)."""
        return f"{base_url.rstrip('/')}/engines/{self.engine}{action}"


_ENGINES: dict[Model, str] = {
    Model.ADA: "text-ada-001",
    Model.BABBAGE: "text-babbage-001",
    Model.CURIE: "text-curie-001",
    Model.DAVINCI: "text-davinci-002",
}
