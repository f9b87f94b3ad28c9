"""
RIFT Optimizer Package

Stage 2 of the pipeline: node counting and optimization-pass bookkeeping
over a parsed expression tree.

Author: xwest
"""

from .coordinator import ASTCoordinator, CoordinationResult, count_nodes, tree_depth

__all__ = [
    "ASTCoordinator",
    "CoordinationResult",
    "count_nodes",
    "tree_depth",
]
