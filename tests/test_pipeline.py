"""
Test suite for the full RIFT pipeline.

Tests cover:
- End-to-end compilation with built-in governance
- Stage announcements and logging
- Diagnostics collected across stages
- Custom governance and configuration failures
- Long left-deep expressions

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from rift import (
    Pipeline, compile_string, GovernanceStore, ConfigurationError,
    MalformedExpressionError, BinaryOp, Identifier, Number
)
from rift.lexer import EmptyInputError, UnclassifiedTokenError


class TestPipeline(unittest.TestCase):
    """Test cases for complete pipeline runs."""

    def setUp(self):
        self.pipeline = Pipeline()

    def test_compile_expression(self):
        result = self.pipeline.run("x + 2 * y")
        self.assertEqual(result.tokens.values(), ["x", "+", "2", "*", "y"])
        self.assertEqual(result.node_count, 5)
        self.assertEqual(result.coordination.depth, 3)
        self.assertEqual(result.output, (
            "(AST\n"
            "  (BinOp +\n"
            "    (Identifier x)\n"
            "    (BinOp *\n"
            "      (Number 2)\n"
            "      (Identifier y)\n"
            "    )\n"
            "  )\n"
            ")\n"
        ))
        self.assertFalse(result.has_errors())
        self.assertEqual(result.diagnostics, [])

    def test_secondary_outputs(self):
        result = compile_string("a - 1")
        self.assertIn('"operator": "-"', result.json)
        self.assertTrue(result.dot.startswith("digraph AST {"))

    def test_stage_announcements(self):
        with self.assertLogs("rift.pipeline", level="INFO") as logs:
            self.pipeline.run("a")
        joined = "\n".join(logs.output)
        self.assertIn("[RIFT-0] TOKENIZER (SP alignment: LEXICAL_ANALYSIS, governance 1.0.0)", joined)
        self.assertIn("[RIFT-1] PARSER_BRIDGE (SP alignment: SYNTACTIC_ANALYSIS", joined)
        self.assertIn("[RIFT-2] AST_COORDINATOR (SP alignment: SEMANTIC_ANALYSIS", joined)
        self.assertIn("[RIFT-3] OUTPUT_GENERATOR (SP alignment: CODE_GENERATION", joined)
        self.assertIn("Tokenization complete: 1 tokens", joined)

    def test_blank_input(self):
        result = self.pipeline.run("   ")
        self.assertEqual(len(result.tokens), 0)
        self.assertIsNone(result.ast)
        self.assertEqual(result.node_count, 0)
        self.assertEqual(result.output, "(AST\n)\n")

    def test_blank_input_rejected(self):
        with self.assertRaises(EmptyInputError):
            Pipeline(reject_empty=True).run("")

    def test_missing_operand_recorded(self):
        result = self.pipeline.run("x +")
        self.assertEqual(result.ast, BinaryOp("+", Identifier("x"), None))
        self.assertTrue(result.has_errors())
        self.assertEqual([e.code for e in result.errors], ["P005"])
        self.assertIn("(Missing)", result.output)
        self.assertEqual(result.node_count, 2)

    def test_strict_pipeline(self):
        with self.assertRaises(MalformedExpressionError):
            compile_string("x +", strict=True)
        with self.assertRaises(MalformedExpressionError):
            compile_string("x y", strict=True)

    def test_trailing_tokens_logged(self):
        with self.assertLogs("rift.pipeline", level="WARNING") as logs:
            result = self.pipeline.run("x = 1")
        self.assertEqual(result.ast, Identifier("x"))
        self.assertTrue(any("2 trailing token(s) ignored" in line for line in logs.output))

    def test_unknown_lexeme_is_warning(self):
        result = self.pipeline.run("a @ b")
        self.assertFalse(result.has_errors())
        self.assertEqual([w.code for w in result.warnings], ["L103"])
        self.assertEqual(result.ast, Identifier("a"))

    def test_error_recovery_disabled(self):
        store = GovernanceStore(0)
        store.add("DFA_CONFIGURATION", "error_recovery", "false")
        with self.assertRaises(UnclassifiedTokenError):
            Pipeline({0: store}).run("a @ b")

    def test_custom_tokenizer_governance(self):
        tokenizer = GovernanceStore.from_mapping(0, {
            "TOKEN_PATTERNS": {
                "IDENTIFIER_PATTERN": r"[a-z]+",
                "IDENTIFIER_PRIORITY": "50",
                "NUMBER_PATTERN": r"[0-9]+",
                "NUMBER_PRIORITY": "50",
                "OPERATOR_PATTERN": r"[-+*/]",
                "OPERATOR_PRIORITY": "50",
            },
        })
        result = Pipeline({0: tokenizer}).run("a * 3")
        self.assertEqual(result.ast, BinaryOp("*", Identifier("a"), Number("3")))

    def test_malformed_pattern_in_governance(self):
        store = GovernanceStore(0)
        store.add("TOKEN_PATTERNS", "NUMBER_PATTERN", "[0-9")
        pipeline = Pipeline({0: store})
        with self.assertLogs("rift.lexer.classifier", level="WARNING"):
            result = pipeline.run("7")
        self.assertEqual(result.tokens[0].priority, 0)
        self.assertIn("L101", [d.code for d in result.warnings])

    def test_unsupported_output_format(self):
        store = GovernanceStore(3)
        store.add("OUTPUT_FORMATS", "primary_format", "C_CODE")
        with self.assertRaises(ConfigurationError) as ctx:
            Pipeline({3: store})
        self.assertEqual(ctx.exception.code, "G004")

    def test_unknown_stage_override(self):
        with self.assertRaises(ConfigurationError) as ctx:
            Pipeline({4: GovernanceStore(0)})
        self.assertEqual(ctx.exception.code, "G001")

    def test_long_left_deep_expression(self):
        terms = 1000
        limit = sys.getrecursionlimit()
        result = compile_string(" + ".join(["a"] * terms))

        self.assertEqual(result.node_count, 2 * terms - 1)
        self.assertEqual(result.coordination.depth, terms)
        self.assertTrue(result.output.startswith("(AST\n  (BinOp +\n    (BinOp +\n"))
        # two lines per operator, one per operand, plus the envelope
        self.assertEqual(result.output.count("\n"), 2 * (terms - 1) + terms + 2)
        self.assertEqual(result.json.count('"type": "Identifier"'), terms)
        self.assertEqual(result.dot.count("->"), 2 * terms - 2)
        self.assertEqual(sys.getrecursionlimit(), limit)

    def test_pipeline_reusable(self):
        first = self.pipeline.run("x +")
        second = self.pipeline.run("a / b")
        self.assertEqual(len(first.errors), 1)
        self.assertEqual(second.errors, [])
        self.assertEqual(second.node_count, 3)


if __name__ == '__main__':
    unittest.main()
