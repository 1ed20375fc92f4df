"""AST data model for config source."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ArrayOp(StrEnum):
    ASSIGN = "="
    APPEND = "+="


@dataclass(frozen=True, slots=True)
class AstBool:
    value: bool


@dataclass(frozen=True, slots=True)
class AstInteger:
    value: int


@dataclass(frozen=True, slots=True)
class AstFloat:
    value: float


@dataclass(frozen=True, slots=True)
class AstString:
    """String literal with `""` already decoded to `"`."""

    value: str


@dataclass(frozen=True, slots=True)
class AstArray:
    """Array literal preserving element order. `{}` has no elements."""

    elements: tuple[AstArrayElement, ...]

    @property
    def is_empty(self) -> bool:
        return len(self.elements) == 0

    def to_python(self) -> list[object]:
        return [
            element.to_python() if isinstance(element, AstArray) else element.value
            for element in self.elements
        ]


@dataclass(frozen=True, slots=True)
class AstProperty:
    """Scalar assignment, e.g. `name = "value";`."""

    name: str
    value: AstValue


@dataclass(frozen=True, slots=True)
class AstArrayProperty:
    """Array assignment (`name[] = {...};`) or append (`name[] += {...};`)."""

    name: str
    op: ArrayOp
    value: AstArray


@dataclass(frozen=True, slots=True)
class AstClass:
    name: str
    body: tuple[AstItem, ...]


@dataclass(frozen=True, slots=True)
class AstClassExtends:
    name: str
    parent: str
    body: tuple[AstItem, ...]


@dataclass(frozen=True, slots=True)
class AstClassForwardDecl:
    name: str


@dataclass(frozen=True, slots=True)
class AstClassDelete:
    name: str


@dataclass(frozen=True, slots=True)
class AstDocument:
    items: tuple[AstItem, ...]


type AstValue = AstBool | AstInteger | AstFloat | AstString
type AstArrayElement = AstValue | AstArray
type AstBodiedClass = AstClass | AstClassExtends
type AstItem = (
    AstProperty
    | AstArrayProperty
    | AstClass
    | AstClassExtends
    | AstClassForwardDecl
    | AstClassDelete
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
    "AstDocument",
    "AstFloat",
    "AstInteger",
    "AstItem",
    "AstProperty",
    "AstString",
    "AstValue",
]
