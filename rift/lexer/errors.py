"""
Error handling for the RIFT tokenizer.

Lexical problems are fault tolerant: a bad pattern degrades to a rule that
never matches and an unmatched lexeme becomes an UNKNOWN token. Both are
recorded so callers can inspect what was substituted.

Author: xwest
"""

from typing import Optional

from ..diagnostics import RiftError, RiftWarning, SourceLocation


class PatternCompilationError(RiftError):
    """
    A configured pattern failed to compile.

    Recorded on the classifier (never raised by it); the rule is treated as
    one that never matches.
    """

    def __init__(self, pattern: str, reason: str, kind_name: Optional[str] = None):
        subject = f"{kind_name} pattern" if kind_name else "Pattern"
        super().__init__(
            message=f"{subject} {pattern!r} does not compile: {reason}",
            code="L101",
            help_text="The rule has been disabled; lexemes are classified by the remaining rules.",
        )
        self.diagnostic.severity = "warning"
        self.pattern = pattern
        self.reason = reason


class EmptyInputError(RiftError):
    """Raised when a tokenizer configured to reject blank input receives one."""

    def __init__(self, source_name: str = "<input>"):
        super().__init__(
            message="Input contains no lexemes",
            code="L102",
            location=SourceLocation(source_name, 1, 1),
            help_text="The input is empty or consists only of whitespace.",
        )


class UnclassifiedTokenError(RiftError):
    """Raised for an unmatched lexeme when error recovery is disabled."""

    def __init__(self, lexeme: str, location: SourceLocation):
        super().__init__(
            message=f"No token pattern matches {lexeme!r}",
            code="L103",
            location=location,
            help_text="Add a pattern for this lexeme or enable error_recovery.",
        )
        self.lexeme = lexeme


class UnclassifiedTokenWarning(RiftWarning):
    """An unmatched lexeme was emitted as an UNKNOWN token."""

    def __init__(self, lexeme: str, location: SourceLocation):
        super().__init__(
            message=f"No token pattern matches {lexeme!r}; emitted as UNKNOWN",
            code="L103",
            location=location,
        )
        self.lexeme = lexeme


LEXER_ERROR_CODES = {
    "L101": "Pattern failed to compile",
    "L102": "Empty input",
    "L103": "Unclassified lexeme",
}
