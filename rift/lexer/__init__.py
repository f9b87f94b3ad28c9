"""
RIFT Lexer Package

Stage 0 of the pipeline: turns a line of text into a TokenStream using
governance-configured pattern rules.

Key Features:
- Highest-priority-wins classification, first rule on ties
- Full-lexeme (anchored) pattern matching
- Malformed patterns degrade to "never matches"
- Unmatched lexemes become UNKNOWN tokens

Author: xwest
"""

from .tokens import Token, TokenKind, TokenStream, PatternRule, UNKNOWN_PRIORITY
from .classifier import PatternClassifier, classify
from .lexer import Tokenizer, tokenize_string
from .errors import (
    PatternCompilationError, EmptyInputError,
    UnclassifiedTokenError, UnclassifiedTokenWarning
)

__all__ = [
    "Tokenizer",
    "PatternClassifier",
    "Token",
    "TokenKind",
    "TokenStream",
    "PatternRule",
    "UNKNOWN_PRIORITY",
    "classify",
    "tokenize_string",
    "PatternCompilationError",
    "EmptyInputError",
    "UnclassifiedTokenError",
    "UnclassifiedTokenWarning",
]
