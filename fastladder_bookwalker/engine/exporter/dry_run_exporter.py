"""Print the encoded batch instead of posting it."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from ..encoder import encode_feeds
from ..feed import Feed
from .base import BaseExporter


class DryRunExporter(BaseExporter):
    """Write the JSON batch to a text stream (stdout unless given)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def publish(self, feeds: Sequence[Feed]) -> None:
        stream = self.stream or sys.stdout
        stream.write(encode_feeds(feeds))
        stream.write("\n")
        stream.flush()


__all__ = ["DryRunExporter"]
