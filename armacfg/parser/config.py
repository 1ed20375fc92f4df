"""High-level parse entrypoint for config source text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from armacfg.diagnostics import ParseError
from armacfg.lexer import Lexer
from armacfg.parser.event import replay_events
from armacfg.parser.grammar import parse_document
from armacfg.parser.options import ParseMode, ParserOptions
from armacfg.parser.parser import Parser
from armacfg.parser.token_source import TokenSource
from armacfg.parser.tree_sink import GreenTreeSink, ParsedGreenTree

if TYPE_CHECKING:
    from armacfg.pipeline import ConfigParseResult

logger = logging.getLogger(__name__)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGreenTree:
    """Parse `text` into a lossless green tree.

    Raises:
        ParseError: on the first syntax error; no partial tree is returned.
    """
    resolved_options = resolve_options(options=options, mode=mode)
    logger.debug("Parsing %d characters in %s mode", len(text), resolved_options.mode)

    source = TokenSource(Lexer(text))
    parser = Parser(source, options=resolved_options)

    try:
        parse_document(parser)
    except ParseError as exc:
        logger.debug("Parse failed with %s at %d:%d", exc.code, exc.line, exc.column)
        raise

    events, diagnostics = parser.finish()
    sink = GreenTreeSink(text, source.finish())
    replay_events(events, sink)
    parsed = sink.finish(diagnostics)
    if diagnostics:
        logger.debug("Parse succeeded with %d warning(s)", len(diagnostics))
    return parsed


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ConfigParseResult:
    """Parse `text` into a result carrier. Syntax errors are captured, not raised."""
    from armacfg.pipeline import ConfigParseResult

    resolved_options = resolve_options(options=options, mode=mode)
    try:
        parsed = parse(text, options=resolved_options)
    except ParseError as exc:
        return ConfigParseResult(source_text=text, options=resolved_options, parsed=None, error=exc)
    return ConfigParseResult(source_text=text, options=resolved_options, parsed=parsed, error=None)
