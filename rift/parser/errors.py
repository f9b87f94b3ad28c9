"""
Error handling for the RIFT parser.

A lenient parser records these errors and keeps going with an absent
operand; a strict parser raises the first one.

Author: xwest
"""

from typing import Optional

from ..diagnostics import RiftError, SourceLocation
from ..lexer.tokens import Token


class MalformedExpressionError(RiftError):
    """The token stream does not form a complete expression."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        code: str = "P005",
        help_text: Optional[str] = None,
        suggestions: Optional[list] = None
    ):
        super().__init__(message, code=code, location=location,
                         help_text=help_text, suggestions=suggestions)
        self.token = token


PARSER_ERROR_CODES = {
    "P005": "Missing operand",
    "P006": "Unconsumed tokens after expression",
}


def create_missing_operand_error(found: Optional[Token], position: int,
                                 source_name: str = "<input>") -> MalformedExpressionError:
    """Create an error for a factor position holding no identifier or number."""
    if found is None:
        return MalformedExpressionError(
            message="Expected an identifier or number, found end of input",
            location=SourceLocation(source_name, 1, position + 1),
            help_text="The expression ends where an operand is required.",
            suggestions=["Remove the trailing operator", "Add the missing operand"],
        )

    return MalformedExpressionError(
        message=f"Expected an identifier or number, found {found.kind.name} {found.value!r}",
        location=found.location(source_name),
        token=found,
        help_text="Every operator needs an operand on both sides.",
        suggestions=["Ensure all operators have operands"],
    )


def create_trailing_tokens_error(token: Token, remaining: int,
                                 source_name: str = "<input>") -> MalformedExpressionError:
    """Create an error for tokens left over once the expression is complete."""
    return MalformedExpressionError(
        message=f"Unexpected {token.kind.name} {token.value!r} after expression "
                f"({remaining} token(s) not consumed)",
        location=token.location(source_name),
        token=token,
        code="P006",
        help_text="Only one expression is accepted per input.",
    )
