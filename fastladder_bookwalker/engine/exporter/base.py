"""Exporter Service Provider Interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..feed import Feed


class BaseExporter(ABC):
    """Uniform contract for relaying one batch of feeds."""

    @abstractmethod
    def publish(self, feeds: Sequence[Feed]) -> None:
        """Relay the whole batch in a single operation."""

    def close(self) -> None:
        """Release underlying resources."""


__all__ = ["BaseExporter"]
