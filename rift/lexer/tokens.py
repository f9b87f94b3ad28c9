"""
Token definitions for the RIFT tokenizer.

Defines the token kinds the stage-0 patterns classify into, the pattern
rule record, the Token itself and the TokenStream the parser consumes.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, overload

from ..diagnostics import SourceLocation


class TokenKind(Enum):
    """Kinds a lexeme can be classified into."""
    IDENTIFIER = auto()
    NUMBER = auto()
    OPERATOR = auto()
    WHITESPACE = auto()     # declared for completeness; never emitted
    UNKNOWN = auto()        # no rule matched


# Priority reported for a lexeme no rule matched.
UNKNOWN_PRIORITY = 0


@dataclass(frozen=True)
class PatternRule:
    """
    One classification rule: a regular expression that must match a whole
    lexeme, the kind it yields and its priority (higher wins).
    """
    pattern: str
    kind: TokenKind
    priority: int

    def __str__(self) -> str:
        return f"{self.kind.name}({self.pattern!r}, priority={self.priority})"


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme.

    `column` is the 1-based position of the token within the stream and
    `line` is always 1; the accepted input is a single line.
    """
    kind: TokenKind
    value: str
    line: int
    column: int
    priority: int

    def location(self, source_name: str = "<input>") -> SourceLocation:
        return SourceLocation(source_name, self.line, self.column)

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    @property
    def is_operand(self) -> bool:
        """Identifiers and numbers can stand as a factor in the grammar."""
        return self.kind in (TokenKind.IDENTIFIER, TokenKind.NUMBER)

    def __str__(self) -> str:
        return f"{self.kind.name}({self.value!r})"

    def __repr__(self) -> str:
        return (f"Token({self.kind.name}, {self.value!r}, line={self.line}, "
                f"column={self.column}, priority={self.priority})")


class TokenStream(Sequence[Token]):
    """Tokens in left-to-right input order."""

    def __init__(self, tokens: Optional[Iterable[Token]] = None):
        self._tokens: List[Token] = list(tokens) if tokens is not None else []

    def append(self, token: Token):
        self._tokens.append(token)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> "TokenStream": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return TokenStream(self._tokens[index])
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __eq__(self, other) -> bool:
        if isinstance(other, TokenStream):
            return self._tokens == other._tokens
        if isinstance(other, list):
            return self._tokens == other
        return NotImplemented

    def values(self) -> List[str]:
        return [token.value for token in self._tokens]

    def kinds(self) -> List[TokenKind]:
        return [token.kind for token in self._tokens]

    def __repr__(self) -> str:
        return f"TokenStream({self._tokens!r})"
