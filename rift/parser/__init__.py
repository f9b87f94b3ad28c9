"""
RIFT Parser Package

Stage 1 of the pipeline: a recursive descent parser that turns a
TokenStream into a binary-operator expression tree.

Key Features:
- Precedence levels read from governance (default: + - below * /)
- Left-associative folding at every level
- Lenient mode records missing operands; strict mode raises

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, NodeIdAllocator,
    Identifier, Number, BinaryOp, UnaryOp, walk
)
from .parser import Parser, parse_tokens
from .errors import MalformedExpressionError, PARSER_ERROR_CODES

__all__ = [
    # Core parser
    "Parser",
    "parse_tokens",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "NodeIdAllocator",
    "Identifier", "Number", "BinaryOp", "UnaryOp", "walk",

    # Error handling
    "MalformedExpressionError", "PARSER_ERROR_CODES",
]
