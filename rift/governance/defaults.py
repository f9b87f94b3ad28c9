"""
Built-in governance records for the four RIFT stages.

These are the values the pipeline runs with when the caller does not hand
in its own configuration. Each record maps section name to an ordered list
of (key, value) pairs.

Author: xwest
"""

from typing import Dict, List, Tuple

GOVERNANCE_VERSION = "1.0.0"

StageRecord = Dict[str, object]

DEFAULT_STAGE_RECORDS: Dict[int, StageRecord] = {
    0: {
        "stage_name": "TOKENIZER",
        "sp_alignment": "LEXICAL_ANALYSIS",
        "sections": {
            "TOKEN_PATTERNS": [
                ("IDENTIFIER_PATTERN", r"^[a-zA-Z_]\w*$"),
                ("IDENTIFIER_PRIORITY", "100"),
                ("NUMBER_PATTERN", r"^\d+(\.\d+)?$"),
                ("NUMBER_PRIORITY", "90"),
                ("OPERATOR_PATTERN", r"^[+\-*/=<>!&|]$"),
                ("OPERATOR_PRIORITY", "80"),
                ("WHITESPACE_PATTERN", r"^\s+$"),
                ("WHITESPACE_PRIORITY", "10"),
            ],
            "DFA_CONFIGURATION": [
                ("initial_state", "START"),
                ("final_states", "IDENTIFIER,NUMBER,OPERATOR"),
                ("error_recovery", "true"),
            ],
        },
    },
    1: {
        "stage_name": "PARSER_BRIDGE",
        "sp_alignment": "SYNTACTIC_ANALYSIS",
        "sections": {
            "GRAMMAR_RULES": [
                ("EXPRESSION_RULE", "expression -> term ((PLUS | MINUS) term)*"),
                ("TERM_RULE", "term -> factor ((MULTIPLY | DIVIDE) factor)*"),
                ("FACTOR_RULE", "factor -> IDENTIFIER | NUMBER"),
            ],
            "PRECEDENCE_TABLE": [
                ("MULTIPLY_PRECEDENCE", "20"),
                ("DIVIDE_PRECEDENCE", "20"),
                ("PLUS_PRECEDENCE", "10"),
                ("MINUS_PRECEDENCE", "10"),
            ],
        },
    },
    2: {
        "stage_name": "AST_COORDINATOR",
        "sp_alignment": "SEMANTIC_ANALYSIS",
        "sections": {
            "OPTIMIZATION_PASSES": [
                ("constant_folding", "enabled"),
                ("dead_code_elimination", "enabled"),
                ("common_subexpression_elimination", "disabled"),
            ],
        },
    },
    3: {
        "stage_name": "OUTPUT_GENERATOR",
        "sp_alignment": "CODE_GENERATION",
        "sections": {
            "OUTPUT_FORMATS": [
                ("primary_format", "LISP_STYLE_AST"),
                ("secondary_format", "C_CODE"),
                ("debug_format", "DOT_GRAPH"),
                ("json_export", "enabled"),
            ],
        },
    },
}

STAGE_IDS = tuple(sorted(DEFAULT_STAGE_RECORDS))


def default_sections(stage_id: int) -> Dict[str, List[Tuple[str, str]]]:
    """Return a copy of the default sections for one stage."""
    record = DEFAULT_STAGE_RECORDS[stage_id]
    return {name: list(pairs) for name, pairs in record["sections"].items()}
