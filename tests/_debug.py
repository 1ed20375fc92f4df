"""Shared debug printers for lexer/parser/ast tests."""

from __future__ import annotations

import os

from armacfg.ast import (
    AstArray,
    AstArrayProperty,
    AstClass,
    AstClassDelete,
    AstClassExtends,
    AstClassForwardDecl,
    AstDocument,
    AstItem,
    AstItemsView,
    AstProperty,
)
from armacfg.cst import GreenNode, GreenToken
from armacfg.diagnostics import Diagnostic
from armacfg.lexer import Token, token_text

_TRUTHY = {"1", "true", "yes", "on"}

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in _TRUTHY
PRINT_CST = os.getenv("PRINT_CST", "0").lower() in _TRUTHY
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in _TRUTHY
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in _TRUTHY
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in _TRUTHY
PRINT_AST_VIEWS = os.getenv("PRINT_AST_VIEWS", "0").lower() in _TRUTHY


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        text = token_text(source, tok)
        start, end = tok.range.start.value, tok.range.end.value
        print(f"{index:03d} {tok.kind.name:<12} range=({start}, {end}) flags={tok.flags} text={text!r}")


def debug_dump_cst(test_name: str, source: str, root: GreenNode) -> None:
    if not PRINT_CST:
        return
    debug_print_source(test_name, source)
    print(f"===== {test_name} CST =====")
    print(_dump_cst(root))


def debug_dump_ast(test_name: str, ast: AstDocument, source: str | None = None) -> None:
    if not PRINT_AST:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"\n===== {test_name} AST =====")
    print(_dump_ast(ast))


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic], source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(diagnostic)


def debug_dump_items_view(test_name: str, view: AstItemsView) -> None:
    if not PRINT_AST_VIEWS:
        return
    print(f"\n===== {test_name} AST VIEW =====")
    for path, item in view.walk():
        print(f"{'/'.join(path) or '<root>'}: {type(item).__name__} {item.name}")


def _dump_cst(node: GreenNode) -> str:
    lines: list[str] = []

    def walk_node(current: GreenNode, depth: int) -> None:
        indent = "  " * depth
        lines.append(f"{indent}{current.kind.name}")
        for child in current.children:
            if isinstance(child, GreenNode):
                walk_node(child, depth + 1)
            else:
                walk_token(child, depth + 1)

    def walk_token(token: GreenToken, depth: int) -> None:
        indent = "  " * depth
        text = token.text.replace("\n", "\\n").replace("\r", "\\r")
        lines.append(
            f"{indent}{token.kind.name} text={text!r} "
            f"leading={len(token.leading_trivia)} trailing={len(token.trailing_trivia)}"
        )

    walk_node(node, 0)
    return "\n".join(lines)


def _dump_ast(ast: AstDocument) -> str:
    lines: list[str] = ["AstDocument"]

    def walk_item(item: AstItem, depth: int) -> None:
        indent = "  " * depth
        match item:
            case AstProperty(name=name, value=value):
                lines.append(f"{indent}AstProperty {name}={value!r}")
            case AstArrayProperty(name=name, op=op, value=value):
                lines.append(f"{indent}AstArrayProperty {name}[] {op} {_format_array(value)}")
            case AstClass(name=name, body=body):
                lines.append(f"{indent}AstClass {name}")
                for child in body:
                    walk_item(child, depth + 1)
            case AstClassExtends(name=name, parent=parent, body=body):
                lines.append(f"{indent}AstClassExtends {name} : {parent}")
                for child in body:
                    walk_item(child, depth + 1)
            case AstClassForwardDecl(name=name):
                lines.append(f"{indent}AstClassForwardDecl {name}")
            case AstClassDelete(name=name):
                lines.append(f"{indent}AstClassDelete {name}")

    for item in ast.items:
        walk_item(item, 1)

    return "\n".join(lines)


def _format_array(array: AstArray) -> str:
    return repr(array.to_python())
