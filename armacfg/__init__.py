"""Lossless parser for class-based config files."""

from armacfg.ast import (
    ArrayOp,
    AstArray,
    AstArrayProperty,
    AstBool,
    AstClass,
    AstClassDelete,
    AstClassExtends,
    AstClassForwardDecl,
    AstDocument,
    AstFloat,
    AstInteger,
    AstItemsView,
    AstProperty,
    AstString,
    lower_tree,
)
from armacfg.ast import parse_to_ast as parse
from armacfg.diagnostics import ConfigSyntaxError, ParseError, UnexpectedEofError
from armacfg.parser import ParseMode, ParserOptions
from armacfg.pipeline import ConfigParseResult, parse_result

__all__ = [
    "ArrayOp",
    "AstArray",
    "AstArrayProperty",
    "AstBool",
    "AstClass",
    "AstClassDelete",
    "AstClassExtends",
    "AstClassForwardDecl",
    "AstDocument",
    "AstFloat",
    "AstInteger",
    "AstItemsView",
    "AstProperty",
    "AstString",
    "ConfigParseResult",
    "ConfigSyntaxError",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "UnexpectedEofError",
    "lower_tree",
    "parse",
    "parse_result",
]
