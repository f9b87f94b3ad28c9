"""
RIFT stage 2 - AST coordinator.

Walks the finished tree to compute structural metrics and resolves which
optimization passes governance has switched on. The passes are bookkeeping
only: the coordinator never rewrites the tree, and the root it returns is
the very object it was given.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..parser.ast_nodes import ASTNode, walk

logger = logging.getLogger(__name__)


@dataclass
class CoordinationResult:
    """Output of the coordinator: the untouched root plus what was computed."""
    root: Optional[ASTNode]
    node_count: int
    depth: int
    passes: List[Tuple[str, bool]] = field(default_factory=list)

    @property
    def enabled_passes(self) -> List[str]:
        return [name for name, enabled in self.passes if enabled]

    @property
    def disabled_passes(self) -> List[str]:
        return [name for name, enabled in self.passes if not enabled]

    def is_enabled(self, pass_name: str) -> bool:
        return pass_name in self.enabled_passes


def count_nodes(node: Optional[ASTNode]) -> int:
    """1 + the counts of all children; a missing node counts 0."""
    return sum(1 for _ in walk(node))


def tree_depth(node: Optional[ASTNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0

    deepest = 0
    stack = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in current.children():
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


class ASTCoordinator:
    """
    Post-parse traversal step.

    Args:
        passes: Ordered (pass_name, enabled) pairs, normally taken from
            CoordinatorSettings
    """

    def __init__(self, passes: Optional[Iterable[Tuple[str, bool]]] = None):
        self.passes: List[Tuple[str, bool]] = [(name, bool(enabled)) for name, enabled in (passes or ())]

    @classmethod
    def from_settings(cls, settings) -> "ASTCoordinator":
        return cls(settings.passes)

    def coordinate(self, root: Optional[ASTNode]) -> CoordinationResult:
        result = CoordinationResult(
            root=root,
            node_count=count_nodes(root),
            depth=tree_depth(root),
            passes=list(self.passes),
        )

        logger.info("AST contains %d nodes", result.node_count)
        logger.debug("Optimization passes enabled: %s; disabled: %s",
                     ", ".join(result.enabled_passes) or "none",
                     ", ".join(result.disabled_passes) or "none")
        return result
