"""
RIFT stage 0 - tokenizer.

Splits a single line of input on whitespace and classifies each lexeme
with the configured pattern rules. Whitespace only separates lexemes; it
never becomes a token of its own.

Author: xwest
"""

import logging
from typing import Iterable, List, Optional, Union

from .tokens import PatternRule, Token, TokenKind, TokenStream, UNKNOWN_PRIORITY
from .classifier import PatternClassifier
from .errors import (
    EmptyInputError, PatternCompilationError, UnclassifiedTokenError, UnclassifiedTokenWarning
)

logger = logging.getLogger(__name__)


class Tokenizer:
    """
    Whitespace-delimited tokenizer driven by PatternRule lists.

    Args:
        rules: Default rules used when tokenize() is not given its own
        error_recovery: Emit unmatched lexemes as UNKNOWN (True) or raise
            UnclassifiedTokenError (False)
        reject_empty: Raise EmptyInputError for blank input instead of
            returning an empty stream
        source_name: Name used in diagnostic locations
    """

    def __init__(
        self,
        rules: Optional[Iterable[PatternRule]] = None,
        error_recovery: bool = True,
        reject_empty: bool = False,
        source_name: str = "<input>",
    ):
        self.classifier = PatternClassifier(rules)
        self.error_recovery = error_recovery
        self.reject_empty = reject_empty
        self.source_name = source_name
        self.warnings: List[UnclassifiedTokenWarning] = []

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "Tokenizer":
        """Build a tokenizer from stage-0 TokenizerSettings."""
        return cls(settings.rules, error_recovery=settings.error_recovery, **kwargs)

    @property
    def rules(self):
        return self.classifier.rules

    def tokenize(self, text: str, rules: Optional[Iterable[PatternRule]] = None) -> TokenStream:
        """
        Tokenize one line of input.

        Args:
            text: Source text
            rules: Rules to classify with instead of the tokenizer's own

        Returns:
            TokenStream with one token per non-whitespace lexeme

        Raises:
            EmptyInputError: If reject_empty is set and text has no lexemes
            UnclassifiedTokenError: If error_recovery is off and a lexeme
                matches no rule
        """
        self.warnings.clear()
        if rules is not None:
            rules = tuple(rules)

        stream = TokenStream()
        for lexeme in text.split():
            column = len(stream) + 1
            rule = self.classifier.best_rule(lexeme, rules)
            if rule is None:
                kind, priority = TokenKind.UNKNOWN, UNKNOWN_PRIORITY
            else:
                kind, priority = rule.kind, rule.priority
            token = Token(kind, lexeme, 1, column, priority)

            if rule is None:
                location = token.location(self.source_name)
                if not self.error_recovery:
                    raise UnclassifiedTokenError(lexeme, location)
                self.warnings.append(UnclassifiedTokenWarning(lexeme, location))

            logger.debug("Token %r classified as %s (priority: %d)", lexeme, kind.name, priority)
            stream.append(token)

        if not stream and self.reject_empty:
            raise EmptyInputError(self.source_name)

        logger.debug("Tokenization complete: %d tokens", len(stream))
        return stream

    @property
    def pattern_errors(self) -> List[PatternCompilationError]:
        return self.classifier.warnings

    def get_diagnostics(self) -> List[Union[PatternCompilationError, UnclassifiedTokenWarning]]:
        """Pattern fallbacks followed by unclassified-lexeme warnings."""
        return list(self.classifier.warnings) + list(self.warnings)


def tokenize_string(text: str, rules: Iterable[PatternRule]) -> TokenStream:
    """
    Convenience function to tokenize a string with an explicit rule list.

    Args:
        text: Source text
        rules: Ordered pattern rules

    Returns:
        TokenStream
    """
    return Tokenizer(rules).tokenize(text)
