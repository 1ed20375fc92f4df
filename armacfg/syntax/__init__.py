"""Syntax kinds."""

from armacfg.syntax.kind import ConfigSyntaxKind

__all__ = ["ConfigSyntaxKind"]
