"""Green CST structures."""

from armacfg.cst.green import GreenElement, GreenNode, GreenToken, TreeBuilder

__all__ = [
    "GreenElement",
    "GreenNode",
    "GreenToken",
    "TreeBuilder",
]
