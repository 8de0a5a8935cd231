"""Signal sinks for human-readable action reports."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Protocol, TextIO


class SignalSink(Protocol):
    def emit(self, message: str) -> None: ...


class NullSink:
    """Discard every signal."""

    def emit(self, message: str) -> None:
        return None


@dataclass
class StreamSink:
    """Print one line per signal.

    The stream defaults to ``sys.stderr`` looked up at emit time so that
    redirected streams (and pytest's capture) are honoured.
    """

    stream: TextIO | None = None

    def emit(self, message: str) -> None:
        print(message, file=self.stream or sys.stderr)


@dataclass
class RecordingSink:
    messages: List[str] = field(default_factory=list)

    def emit(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


def resolve_sink(sink: SignalSink | None) -> SignalSink:
    return NullSink() if sink is None else sink


def emit_warning(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["NullSink", "RecordingSink", "SignalSink", "StreamSink", "emit_warning", "resolve_sink"]
