"""Parse result carrier and pipeline entrypoints."""

from armacfg.parser.config import parse_result
from armacfg.pipeline.result import ConfigParseResult

__all__ = ["ConfigParseResult", "parse_result"]
