"""
RIFT stage 1 - recursive descent expression parser.

Grammar (loosest binding first):

    expression := term ( ('+' | '-') term )*
    term       := factor ( ('*' | '/') factor )*
    factor     := IDENTIFIER | NUMBER

The operator levels come from the stage-1 precedence table. Each level is
one recursive call, so the default table is exactly the grammar above.
Every level is left associative.

Author: xwest
"""

import logging
from typing import FrozenSet, List, Optional, Sequence

from ..governance.config import ParserSettings
from ..lexer.tokens import Token, TokenKind
from .ast_nodes import ASTNode, BinaryOp, Identifier, NodeIdAllocator, Number
from .errors import (
    MalformedExpressionError, create_missing_operand_error, create_trailing_tokens_error
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Single-cursor parser over a token sequence. No backtracking.

    A missing operand is left as a None child. In the default (lenient)
    mode the problem is recorded in `errors` and parsing continues; with
    strict=True the first such error is raised, and so is any token left
    unconsumed after the expression.
    """

    def __init__(self, settings: Optional[ParserSettings] = None, strict: bool = False,
                 source_name: str = "<input>"):
        self.settings = settings or ParserSettings()
        self.strict = strict
        self.source_name = source_name
        self.levels: List[FrozenSet[str]] = self.settings.levels()

        self.tokens: Sequence[Token] = ()
        self.position = 0
        self.errors: List[MalformedExpressionError] = []
        self.node_ids = NodeIdAllocator()

    def parse(self, tokens: Sequence[Token]) -> Optional[ASTNode]:
        """
        Parse a token sequence into an expression tree.

        Trailing tokens after a complete expression are ignored unless the
        parser is strict; check `at_end()` afterwards to detect them.

        Returns:
            The root node, or None for an empty token sequence

        Raises:
            MalformedExpressionError: Only in strict mode
        """
        self.tokens = tokens
        self.position = 0
        self.errors = []
        self.node_ids = NodeIdAllocator()

        if len(tokens) == 0:
            logger.debug("Empty token stream; no AST root")
            return None

        root = self._parse_level(0)

        if self.strict and not self.at_end():
            raise create_trailing_tokens_error(
                self.current(), len(self.tokens) - self.position, self.source_name
            )

        logger.debug("Parsing complete: consumed %d of %d tokens, %d error(s)",
                     self.position, len(self.tokens), len(self.errors))
        return root

    # Cursor

    def current(self) -> Optional[Token]:
        """Token under the cursor, or None once the stream is exhausted."""
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def advance(self):
        """Move the cursor forward by one; does nothing past the end."""
        if self.position < len(self.tokens):
            self.position += 1

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    # Grammar

    def _parse_level(self, level: int) -> Optional[ASTNode]:
        if level >= len(self.levels):
            return self._parse_factor()

        operators = self.levels[level]
        left = self._parse_level(level + 1)

        while self._check_operator(operators):
            operator_token = self.current()
            self.advance()
            right = self._parse_level(level + 1)
            left = BinaryOp(operator_token.value, left, right,
                            node_id=self.node_ids.allocate(), token=operator_token)

        return left

    def _parse_factor(self) -> Optional[ASTNode]:
        token = self.current()

        if token is not None and token.is_operand:
            self.advance()
            node_class = Identifier if token.kind == TokenKind.IDENTIFIER else Number
            return node_class(token.value, node_id=self.node_ids.allocate(), token=token)

        error = create_missing_operand_error(token, self.position, self.source_name)
        if self.strict:
            raise error
        logger.debug("Missing operand at position %d", self.position)
        self.errors.append(error)
        return None

    def _check_operator(self, operators: FrozenSet[str]) -> bool:
        token = self.current()
        return token is not None and token.is_operator and token.value in operators


def parse_tokens(tokens: Sequence[Token], strict: bool = False) -> Optional[ASTNode]:
    """
    Convenience function to parse tokens with the default precedence table.

    Raises:
        MalformedExpressionError: Only when strict is True
    """
    return Parser(strict=strict).parse(tokens)
