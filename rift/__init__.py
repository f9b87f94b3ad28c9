"""
RIFT Stage Pipeline Package

A small governance-configured compiler front end for single-line arithmetic
expressions. Every stage reads its behaviour from a per-stage configuration
record rather than from hardcoded logic.

Architecture:
    rift/
    ├── governance/      # Per-stage configuration store and typed settings
    ├── lexer/           # RIFT-0: pattern classification and tokenization
    ├── parser/          # RIFT-1: recursive descent parsing and AST nodes
    ├── optimizer/       # RIFT-2: AST coordination (metrics, pass bookkeeping)
    ├── output/          # RIFT-3: LISP-style, JSON and DOT renderings
    └── pipeline.py      # Runs the four stages in order

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .diagnostics import Diagnostic, RiftError, RiftWarning, SourceLocation
from .governance import GovernanceStore, StageConfig, ConfigurationError
from .lexer import Tokenizer, PatternClassifier, PatternRule, Token, TokenKind, TokenStream
from .parser import Parser, ASTNode, Identifier, Number, BinaryOp, UnaryOp, MalformedExpressionError
from .optimizer import ASTCoordinator, CoordinationResult
from .output import OutputRenderer, render_ast
from .pipeline import Pipeline, PipelineResult, compile_string

__all__ = [
    # Pipeline
    "Pipeline",
    "PipelineResult",
    "compile_string",

    # Stages
    "GovernanceStore",
    "StageConfig",
    "Tokenizer",
    "PatternClassifier",
    "Parser",
    "ASTCoordinator",
    "CoordinationResult",
    "OutputRenderer",
    "render_ast",

    # Data model
    "PatternRule",
    "Token",
    "TokenKind",
    "TokenStream",
    "ASTNode",
    "Identifier",
    "Number",
    "BinaryOp",
    "UnaryOp",

    # Diagnostics
    "Diagnostic",
    "SourceLocation",
    "RiftError",
    "RiftWarning",
    "ConfigurationError",
    "MalformedExpressionError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
