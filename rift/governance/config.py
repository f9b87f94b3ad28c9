"""
Typed configuration records for the RIFT stages.

StageConfig is the generic per-stage record (id, name, SP alignment,
sections). The *Settings classes are typed views over one stage's store,
each exposing only the fields that stage actually uses.

Author: xwest
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from ..lexer.tokens import PatternRule, TokenKind
from .errors import ConfigurationError, create_missing_key_error
from .store import GovernanceStore


@dataclass(frozen=True)
class StageConfig:
    """Read-only configuration record for one stage."""
    stage_id: int
    stage_name: str
    sp_alignment: str
    governance_version: str
    sections: Mapping[str, Mapping[str, str]]

    def get(self, section: str, key: str) -> Optional[str]:
        return self.sections.get(section, {}).get(key)


# ============================================================================
# Stage 0 - tokenizer
# ============================================================================

TOKEN_PATTERNS_SECTION = "TOKEN_PATTERNS"
DFA_SECTION = "DFA_CONFIGURATION"

# Rule order follows this tuple; it decides ties between equal priorities.
RULE_KINDS: Tuple[TokenKind, ...] = (
    TokenKind.IDENTIFIER,
    TokenKind.NUMBER,
    TokenKind.OPERATOR,
    TokenKind.WHITESPACE,
)


@dataclass(frozen=True)
class TokenizerSettings:
    """
    Stage-0 settings.

    `rules` and `error_recovery` drive the tokenizer. `initial_state` and
    `final_states` are informational, like a stage's SP alignment: they
    are read from DFA_CONFIGURATION and kept on the record, but
    classification never consults them.
    """
    rules: Tuple[PatternRule, ...]
    initial_state: str = "START"
    final_states: Tuple[str, ...] = ()
    error_recovery: bool = True

    @classmethod
    def from_store(cls, store: GovernanceStore) -> "TokenizerSettings":
        """
        Build the tokenizer's pattern rules from TOKEN_PATTERNS.

        Each kind needs both <KIND>_PATTERN and <KIND>_PRIORITY; a kind with
        neither is left out.

        Raises:
            ConfigurationError: If a kind is half-configured or no rule is
                configured at all
        """
        rules: List[PatternRule] = []
        for kind in RULE_KINDS:
            pattern_key = f"{kind.name}_PATTERN"
            priority_key = f"{kind.name}_PRIORITY"
            pattern = store.get(TOKEN_PATTERNS_SECTION, pattern_key)
            priority = store.get_int(TOKEN_PATTERNS_SECTION, priority_key)

            if pattern is None and priority is None:
                continue
            if pattern is None:
                raise create_missing_key_error(store.stage_id, TOKEN_PATTERNS_SECTION, pattern_key)
            if priority is None:
                raise create_missing_key_error(store.stage_id, TOKEN_PATTERNS_SECTION, priority_key)

            rules.append(PatternRule(pattern, kind, priority))

        if not rules:
            raise ConfigurationError(
                message=f"No token patterns configured for stage {store.stage_id}",
                code="G002",
                stage_id=store.stage_id,
                section=TOKEN_PATTERNS_SECTION,
                help_text="Configure at least one <KIND>_PATTERN / <KIND>_PRIORITY pair.",
            )

        final_states = store.get(DFA_SECTION, "final_states") or ""
        return cls(
            rules=tuple(rules),
            initial_state=store.get(DFA_SECTION, "initial_state") or "START",
            final_states=tuple(s.strip() for s in final_states.split(",") if s.strip()),
            error_recovery=store.get_bool(DFA_SECTION, "error_recovery", default=True),
        )


# ============================================================================
# Stage 1 - parser
# ============================================================================

GRAMMAR_SECTION = "GRAMMAR_RULES"
PRECEDENCE_SECTION = "PRECEDENCE_TABLE"

OPERATOR_SYMBOLS: Dict[str, str] = {
    "PLUS": "+",
    "MINUS": "-",
    "MULTIPLY": "*",
    "DIVIDE": "/",
}

DEFAULT_PRECEDENCE: Dict[str, int] = {
    "+": 10,
    "-": 10,
    "*": 20,
    "/": 20,
}


@dataclass(frozen=True)
class ParserSettings:
    precedence: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_PRECEDENCE))
    grammar_rules: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_store(cls, store: GovernanceStore) -> "ParserSettings":
        """Read the operator precedence table; falls back to + - below * /."""
        precedence: Dict[str, int] = {}
        for name, symbol in OPERATOR_SYMBOLS.items():
            value = store.get_int(PRECEDENCE_SECTION, f"{name}_PRECEDENCE")
            if value is not None:
                precedence[symbol] = value

        if not precedence:
            precedence = dict(DEFAULT_PRECEDENCE)

        return cls(precedence=precedence, grammar_rules=store.section(GRAMMAR_SECTION))

    def levels(self) -> List[FrozenSet[str]]:
        """Operator sets ordered from loosest to tightest binding."""
        by_value: Dict[int, set] = {}
        for symbol, value in self.precedence.items():
            by_value.setdefault(value, set()).add(symbol)
        return [frozenset(by_value[value]) for value in sorted(by_value)]


# ============================================================================
# Stage 2 - AST coordinator
# ============================================================================

PASSES_SECTION = "OPTIMIZATION_PASSES"


@dataclass(frozen=True)
class CoordinatorSettings:
    passes: Tuple[Tuple[str, bool], ...] = ()

    @classmethod
    def from_store(cls, store: GovernanceStore) -> "CoordinatorSettings":
        section = store.section(PASSES_SECTION)
        return cls(passes=tuple(
            (name, store.get_bool(PASSES_SECTION, name)) for name in section
        ))


# ============================================================================
# Stage 3 - output
# ============================================================================

OUTPUT_SECTION = "OUTPUT_FORMATS"


@dataclass(frozen=True)
class OutputSettings:
    primary_format: str = "LISP_STYLE_AST"
    secondary_format: Optional[str] = None
    debug_format: Optional[str] = None
    json_export: bool = False

    @classmethod
    def from_store(cls, store: GovernanceStore) -> "OutputSettings":
        return cls(
            primary_format=store.get(OUTPUT_SECTION, "primary_format") or "LISP_STYLE_AST",
            secondary_format=store.get(OUTPUT_SECTION, "secondary_format"),
            debug_format=store.get(OUTPUT_SECTION, "debug_format"),
            json_export=store.get_bool(OUTPUT_SECTION, "json_export", default=False),
        )
