"""
Priority-resolving pattern classifier.

Every rule is tried against the whole lexeme. The matching rule with the
greatest priority decides the kind; on equal priority the rule that comes
first in the supplied order wins. Nothing matching yields UNKNOWN with
priority 0.

Author: xwest
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from .tokens import PatternRule, TokenKind, UNKNOWN_PRIORITY
from .errors import PatternCompilationError

logger = logging.getLogger(__name__)


class PatternClassifier:
    """
    Classifies lexemes against an ordered list of PatternRule.

    Compiled patterns are cached per classifier. A pattern that fails to
    compile is cached as "never matches" and reported once through
    `warnings`.
    """

    def __init__(self, rules: Optional[Iterable[PatternRule]] = None):
        self.rules: Tuple[PatternRule, ...] = tuple(rules) if rules is not None else ()
        self.warnings: List[PatternCompilationError] = []
        self._compiled: Dict[str, Optional[Pattern[str]]] = {}

    def _compile(self, rule: PatternRule) -> Optional[Pattern[str]]:
        if rule.pattern in self._compiled:
            return self._compiled[rule.pattern]

        try:
            compiled = re.compile(rule.pattern)
        except re.error as e:
            warning = PatternCompilationError(rule.pattern, str(e), rule.kind.name)
            self.warnings.append(warning)
            logger.warning("%s", warning.diagnostic.message)
            compiled = None

        self._compiled[rule.pattern] = compiled
        return compiled

    def matches(self, rule: PatternRule, lexeme: str) -> bool:
        """True if the rule's pattern matches the entire lexeme."""
        compiled = self._compile(rule)
        if compiled is None:
            return False
        return compiled.fullmatch(lexeme) is not None

    def best_rule(self, lexeme: str,
                  rules: Optional[Iterable[PatternRule]] = None) -> Optional[PatternRule]:
        """The winning rule for a lexeme, or None if no rule matches."""
        best: Optional[PatternRule] = None
        for rule in (self.rules if rules is None else rules):
            if not self.matches(rule, lexeme):
                continue
            # strictly greater: the earlier rule keeps a tie
            if best is None or rule.priority > best.priority:
                best = rule
        return best

    def classify(self, lexeme: str,
                 rules: Optional[Iterable[PatternRule]] = None) -> Tuple[TokenKind, int]:
        """
        Resolve a lexeme to exactly one kind.

        Args:
            lexeme: Text to classify
            rules: Rules to use instead of the classifier's own

        Returns:
            (kind, priority) of the winning rule, or (UNKNOWN, 0)
        """
        best = self.best_rule(lexeme, rules)
        if best is None:
            return TokenKind.UNKNOWN, UNKNOWN_PRIORITY
        return best.kind, best.priority

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


def classify(lexeme: str, rules: Iterable[PatternRule]) -> Tuple[TokenKind, int]:
    """Classify one lexeme with a throwaway classifier."""
    return PatternClassifier(rules).classify(lexeme)
