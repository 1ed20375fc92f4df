"""AST consumer views built on top of canonical AST nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from armacfg.ast.model import (
    AstArrayProperty,
    AstBodiedClass,
    AstClass,
    AstClassExtends,
    AstClassForwardDecl,
    AstDocument,
    AstItem,
    AstProperty,
)

type AstPropertyItem = AstProperty | AstArrayProperty
type AstClassItem = AstClass | AstClassExtends | AstClassForwardDecl
type AstItemsMultimap = dict[str, list[AstItem]]


@dataclass(frozen=True, slots=True)
class AstItemsView:
    """Read-only queries over a document or a class body.

    Items keep source order. Later definitions win for the `get_*` lookups,
    matching how a config is resolved when the same name is assigned twice.
    """

    items: tuple[AstItem, ...]

    @classmethod
    def of(cls, owner: AstDocument | AstBodiedClass) -> AstItemsView:
        if isinstance(owner, AstDocument):
            return cls(owner.items)
        return cls(owner.body)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[AstItem]:
        return iter(self.items)

    def by_name(self, name: str) -> list[AstItem]:
        return [item for item in self.items if item.name == name]

    def as_multimap(self) -> AstItemsMultimap:
        result: AstItemsMultimap = {}
        for item in self.items:
            result.setdefault(item.name, []).append(item)
        return result

    def properties(self) -> list[AstPropertyItem]:
        return [item for item in self.items if isinstance(item, (AstProperty, AstArrayProperty))]

    def classes(self) -> list[AstClassItem]:
        return [
            item
            for item in self.items
            if isinstance(item, (AstClass, AstClassExtends, AstClassForwardDecl))
        ]

    def get_property(self, name: str) -> AstPropertyItem | None:
        for item in reversed(self.items):
            if item.name == name and isinstance(item, (AstProperty, AstArrayProperty)):
                return item
        return None

    def get_class(self, name: str) -> AstBodiedClass | None:
        """Last class named `name` that has a body (forward declarations skipped)."""
        for item in reversed(self.items):
            if item.name == name and isinstance(item, (AstClass, AstClassExtends)):
                return item
        return None

    def child(self, name: str) -> AstItemsView | None:
        found = self.get_class(name)
        if found is None:
            return None
        return AstItemsView.of(found)

    def walk(self) -> Iterator[tuple[tuple[str, ...], AstItem]]:
        """Yield `(class_path, item)` depth-first in source order."""
        yield from _walk(self.items, ())


def _walk(
    items: tuple[AstItem, ...],
    path: tuple[str, ...],
) -> Iterator[tuple[tuple[str, ...], AstItem]]:
    for item in items:
        yield path, item
        if isinstance(item, (AstClass, AstClassExtends)):
            yield from _walk(item.body, (*path, item.name))


__all__ = ["AstClassItem", "AstItemsMultimap", "AstItemsView", "AstPropertyItem"]
