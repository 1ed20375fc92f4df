"""Typed AST over the config CST."""

from armacfg.ast.lower import decode_string, lower_tree, parse_to_ast
from armacfg.ast.model import (
    ArrayOp,
    AstArray,
    AstArrayElement,
    AstArrayProperty,
    AstBodiedClass,
    AstBool,
    AstClass,
    AstClassDelete,
    AstClassExtends,
    AstClassForwardDecl,
    AstDocument,
    AstFloat,
    AstInteger,
    AstItem,
    AstProperty,
    AstString,
    AstValue,
)
from armacfg.ast.views import (
    AstClassItem,
    AstItemsMultimap,
    AstItemsView,
    AstPropertyItem,
)

__all__ = [
    "ArrayOp",
    "AstArray",
    "AstArrayElement",
    "AstArrayProperty",
    "AstBodiedClass",
    "AstBool",
    "AstClass",
    "AstClassDelete",
    "AstClassExtends",
    "AstClassForwardDecl",
    "AstClassItem",
    "AstDocument",
    "AstFloat",
    "AstInteger",
    "AstItem",
    "AstItemsMultimap",
    "AstItemsView",
    "AstProperty",
    "AstPropertyItem",
    "AstString",
    "AstValue",
    "decode_string",
    "lower_tree",
    "parse_to_ast",
]
