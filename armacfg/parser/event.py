"""Parser events.

The parser appends events instead of building nodes directly, so a node's
kind can be decided after its children have been parsed. Nothing is built
until the whole input has parsed cleanly; then the events are replayed into
a `TreeSink`.
"""

from dataclasses import dataclass
from typing import Protocol

from armacfg.syntax import ConfigSyntaxKind
from armacfg.text import TextSize


@dataclass(frozen=True, slots=True)
class StartEvent:
    """Opens a node. Holds `TOMBSTONE` until its marker is completed."""

    kind: ConfigSyntaxKind = ConfigSyntaxKind.TOMBSTONE


@dataclass(frozen=True, slots=True)
class FinishEvent:
    pass


@dataclass(frozen=True, slots=True)
class TokenEvent:
    """A significant token ending at `end`. Its start is wherever the sink left off."""

    kind: ConfigSyntaxKind
    end: TextSize


type Event = StartEvent | FinishEvent | TokenEvent


class TreeSink(Protocol):
    def start_node(self, kind: ConfigSyntaxKind) -> None: ...

    def token(self, kind: ConfigSyntaxKind, end: TextSize) -> None: ...

    def finish_node(self) -> None: ...


def replay_events(events: list[Event], sink: TreeSink) -> None:
    for event in events:
        match event:
            case StartEvent(kind=ConfigSyntaxKind.TOMBSTONE):
                raise RuntimeError("Parser left an uncompleted marker in the event stream")
            case StartEvent(kind=kind):
                sink.start_node(kind)
            case TokenEvent(kind=kind, end=end):
                sink.token(kind, end)
            case FinishEvent():
                sink.finish_node()
