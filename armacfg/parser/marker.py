"""Markers for event-based parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from armacfg.parser.event import FinishEvent, StartEvent
from armacfg.syntax import ConfigSyntaxKind
from armacfg.text import TextSize

if TYPE_CHECKING:
    from armacfg.parser.parser import Parser


@dataclass(slots=True)
class Marker:
    pos: int
    start: TextSize

    def complete(self, parser: Parser, kind: ConfigSyntaxKind) -> CompletedMarker:
        event = parser.events[self.pos]
        if not isinstance(event, StartEvent):
            raise RuntimeError("Marker must point to a StartEvent")
        parser.events[self.pos] = StartEvent(kind=kind)

        finish_pos = len(parser.events)
        parser.events.append(FinishEvent())
        return CompletedMarker(start_pos=self.pos, finish_pos=finish_pos, offset=self.start, kind=kind)


@dataclass(frozen=True, slots=True)
class CompletedMarker:
    start_pos: int
    finish_pos: int
    offset: TextSize
    kind: ConfigSyntaxKind
