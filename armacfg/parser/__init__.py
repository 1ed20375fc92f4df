"""Parser infrastructure (token source + event-based parser + tree sink)."""

from armacfg.parser.config import parse, parse_result, resolve_options
from armacfg.parser.event import (
    Event,
    FinishEvent,
    StartEvent,
    TokenEvent,
    replay_events,
)
from armacfg.parser.grammar import parse_document, parse_item_list
from armacfg.parser.marker import CompletedMarker, Marker
from armacfg.parser.options import DEFAULT_MAX_NESTING_DEPTH, ParseMode, ParserOptions
from armacfg.parser.parser import Parser, ParserProgress
from armacfg.parser.token_source import TokenSource
from armacfg.parser.tree_sink import GreenTreeSink, ParsedGreenTree

__all__ = [
    "DEFAULT_MAX_NESTING_DEPTH",
    "CompletedMarker",
    "Event",
    "FinishEvent",
    "GreenTreeSink",
    "Marker",
    "ParseMode",
    "ParsedGreenTree",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "StartEvent",
    "TokenEvent",
    "TokenSource",
    "parse",
    "parse_document",
    "parse_item_list",
    "parse_result",
    "replay_events",
    "resolve_options",
]
