"""Lower a config CST into a typed AST."""

from __future__ import annotations

from armacfg.ast.model import (
    ArrayOp,
    AstArray,
    AstArrayElement,
    AstArrayProperty,
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
from armacfg.cst import GreenNode
from armacfg.parser import ParseMode, ParserOptions, parse
from armacfg.syntax import ConfigSyntaxKind

_ARRAY_OPERATORS: dict[ConfigSyntaxKind, ArrayOp] = {
    ConfigSyntaxKind.EQUAL: ArrayOp.ASSIGN,
    ConfigSyntaxKind.PLUS_EQUAL: ArrayOp.APPEND,
}


def parse_to_ast(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> AstDocument:
    """Parse `text` and lower it straight to an `AstDocument`.

    Raises:
        ParseError: when `text` is not a valid config document.
    """
    parsed = parse(text, options=options, mode=mode)
    return lower_tree(parsed.root)


def lower_tree(root: GreenNode) -> AstDocument:
    document = root if root.kind == ConfigSyntaxKind.DOCUMENT else root.first_child_node(ConfigSyntaxKind.DOCUMENT)
    if document is None:
        return AstDocument(items=())

    item_list = document.first_child_node(ConfigSyntaxKind.ITEM_LIST)
    if item_list is None:
        return AstDocument(items=())

    return AstDocument(items=_lower_item_list(item_list))


def _lower_item_list(node: GreenNode) -> tuple[AstItem, ...]:
    items: list[AstItem] = []
    # Stray `;` tokens and bare identifiers carry no data.
    for child in node.child_nodes():
        match child.kind:
            case ConfigSyntaxKind.PROPERTY:
                items.append(_lower_property(child))
            case ConfigSyntaxKind.ARRAY_PROPERTY:
                items.append(_lower_array_property(child))
            case ConfigSyntaxKind.CLASS:
                items.append(AstClass(name=_names(child)[0], body=_lower_body(child)))
            case ConfigSyntaxKind.CLASS_EXTENDS:
                name, parent = _names(child)
                items.append(AstClassExtends(name=name, parent=parent, body=_lower_body(child)))
            case ConfigSyntaxKind.CLASS_FORWARD_DECL:
                items.append(AstClassForwardDecl(name=_names(child)[0]))
            case ConfigSyntaxKind.CLASS_DELETE:
                items.append(AstClassDelete(name=_names(child)[0]))
    return tuple(items)


def _lower_property(node: GreenNode) -> AstProperty:
    literal = _require_child(node, ConfigSyntaxKind.LITERAL)
    return AstProperty(name=_names(node)[0], value=_lower_literal(literal))


def _lower_array_property(node: GreenNode) -> AstArrayProperty:
    op: ArrayOp | None = None
    for token in node.child_tokens():
        if token.kind in _ARRAY_OPERATORS:
            op = _ARRAY_OPERATORS[token.kind]
            break
    if op is None:
        raise ValueError("Array property without an assignment operator")

    array = _require_child(node, ConfigSyntaxKind.ARRAY)
    return AstArrayProperty(name=_names(node)[0], op=op, value=_lower_array(array))


def _lower_array(node: GreenNode) -> AstArray:
    elements: list[AstArrayElement] = []
    for child in node.child_nodes():
        if child.kind == ConfigSyntaxKind.ARRAY:
            elements.append(_lower_array(child))
        elif child.kind == ConfigSyntaxKind.LITERAL:
            elements.append(_lower_literal(child))
    return AstArray(elements=tuple(elements))


def _lower_literal(node: GreenNode) -> AstValue:
    token = next(node.child_tokens(), None)
    if token is None:
        raise ValueError("Literal node without a token")

    match token.kind:
        case ConfigSyntaxKind.TRUE_KW:
            return AstBool(True)
        case ConfigSyntaxKind.FALSE_KW:
            return AstBool(False)
        case ConfigSyntaxKind.INT:
            return AstInteger(int(token.text))
        case ConfigSyntaxKind.FLOAT:
            return AstFloat(float(token.text))
        case ConfigSyntaxKind.STRING:
            return AstString(decode_string(token.text))
    raise ValueError(f"Unexpected literal token {token.kind.name}")


def decode_string(raw_text: str) -> str:
    """Strip the outer quotes of a string token and undouble `""`."""
    return raw_text[1:-1].replace('""', '"')


def _lower_body(node: GreenNode) -> tuple[AstItem, ...]:
    return _lower_item_list(_require_child(node, ConfigSyntaxKind.ITEM_LIST))


def _names(node: GreenNode) -> list[str]:
    return [token.text for token in node.child_tokens() if token.kind == ConfigSyntaxKind.IDENTIFIER]


def _require_child(node: GreenNode, kind: ConfigSyntaxKind) -> GreenNode:
    child = node.first_child_node(kind)
    if child is None:
        raise ValueError(f"{node.kind.name} node without a {kind.name} child")
    return child


__all__ = ["decode_string", "lower_tree", "parse_to_ast"]
