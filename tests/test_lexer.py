"""
Test suite for the RIFT tokenizer and pattern classifier.

Tests cover:
- Priority resolution and first-rule tie-breaking
- Malformed pattern fallback
- Whitespace splitting, positions and blank input
- Unclassified lexemes with and without error recovery

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from rift.governance import GovernanceStore, TokenizerSettings
from rift.lexer import (
    Tokenizer, PatternClassifier, PatternRule, Token, TokenKind, TokenStream,
    EmptyInputError, UnclassifiedTokenError, tokenize_string
)
from rift.lexer.classifier import classify


class TestPatternClassifier(unittest.TestCase):
    """Test cases for priority-based classification."""

    def setUp(self):
        self.rules = TokenizerSettings.from_store(GovernanceStore(0)).rules
        self.classifier = PatternClassifier(self.rules)

    def test_default_rules(self):
        self.assertEqual(self.classifier.classify("x"), (TokenKind.IDENTIFIER, 100))
        self.assertEqual(self.classifier.classify("_tmp1"), (TokenKind.IDENTIFIER, 100))
        self.assertEqual(self.classifier.classify("42"), (TokenKind.NUMBER, 90))
        self.assertEqual(self.classifier.classify("3.14"), (TokenKind.NUMBER, 90))
        self.assertEqual(self.classifier.classify("*"), (TokenKind.OPERATOR, 80))
        self.assertEqual(self.classifier.classify("="), (TokenKind.OPERATOR, 80))

    def test_no_match_is_unknown_zero(self):
        self.assertEqual(self.classifier.classify("@"), (TokenKind.UNKNOWN, 0))
        self.assertEqual(self.classifier.classify("3.x"), (TokenKind.UNKNOWN, 0))
        self.assertEqual(self.classifier.classify("**"), (TokenKind.UNKNOWN, 0))
        self.assertIsNone(self.classifier.best_rule("@"))

    def test_highest_priority_wins(self):
        rules = [
            PatternRule("^[0-9]+$", TokenKind.NUMBER, 90),
            PatternRule("^.$", TokenKind.UNKNOWN, 95),
        ]
        self.assertEqual(classify("5", rules), (TokenKind.UNKNOWN, 95))
        self.assertEqual(classify("55", rules), (TokenKind.NUMBER, 90))

    def test_first_rule_wins_ties(self):
        rules = [
            PatternRule("[a-z]+", TokenKind.IDENTIFIER, 50),
            PatternRule("[a-z0-9]+", TokenKind.NUMBER, 50),
        ]
        self.assertEqual(classify("abc", rules), (TokenKind.IDENTIFIER, 50))
        self.assertEqual(classify("abc", list(reversed(rules))), (TokenKind.NUMBER, 50))

    def test_whole_lexeme_match(self):
        rules = [PatternRule("[0-9]", TokenKind.NUMBER, 10)]
        self.assertEqual(classify("7", rules), (TokenKind.NUMBER, 10))
        self.assertEqual(classify("77", rules), (TokenKind.UNKNOWN, 0))

    def test_call_rules_override_own_rules(self):
        rules = [PatternRule(".+", TokenKind.OPERATOR, 1)]
        self.assertEqual(self.classifier.classify("x", rules), (TokenKind.OPERATOR, 1))
        self.assertEqual(self.classifier.classify("x"), (TokenKind.IDENTIFIER, 100))

    def test_malformed_pattern_never_matches(self):
        classifier = PatternClassifier([
            PatternRule("[unclosed", TokenKind.IDENTIFIER, 100),
            PatternRule("[a-z]+", TokenKind.IDENTIFIER, 50),
        ])
        with self.assertLogs("rift.lexer.classifier", level="WARNING"):
            self.assertEqual(classifier.classify("abc"), (TokenKind.IDENTIFIER, 50))

        # Reported once, however often the rule is tried
        classifier.classify("def")
        classifier.classify("[unclosed")
        self.assertTrue(classifier.has_warnings())
        self.assertEqual(len(classifier.warnings), 1)

        warning = classifier.warnings[0]
        self.assertEqual(warning.code, "L101")
        self.assertEqual(warning.diagnostic.severity, "warning")
        self.assertEqual(warning.pattern, "[unclosed")

    def test_empty_rule_list(self):
        self.assertEqual(classify("x", []), (TokenKind.UNKNOWN, 0))


class TestTokenizer(unittest.TestCase):
    """Test cases for the stage-0 tokenizer."""

    def setUp(self):
        self.settings = TokenizerSettings.from_store(GovernanceStore(0))
        self.tokenizer = Tokenizer.from_settings(self.settings)

    def test_simple_expression(self):
        tokens = self.tokenizer.tokenize("x + 2 * y")
        self.assertIsInstance(tokens, TokenStream)
        self.assertEqual(tokens.values(), ["x", "+", "2", "*", "y"])
        self.assertEqual(tokens.kinds(), [
            TokenKind.IDENTIFIER, TokenKind.OPERATOR, TokenKind.NUMBER,
            TokenKind.OPERATOR, TokenKind.IDENTIFIER,
        ])
        self.assertEqual([t.priority for t in tokens], [100, 80, 90, 80, 100])

    def test_positions(self):
        tokens = self.tokenizer.tokenize("   a   *\t 10  ")
        self.assertEqual([t.column for t in tokens], [1, 2, 3])
        self.assertTrue(all(t.line == 1 for t in tokens))
        self.assertEqual(tokens[0], Token(TokenKind.IDENTIFIER, "a", 1, 1, 100))

    def test_whitespace_never_emitted(self):
        tokens = self.tokenizer.tokenize("a \t b")
        self.assertNotIn(TokenKind.WHITESPACE, tokens.kinds())
        self.assertEqual(len(tokens), 2)

    def test_blank_input(self):
        for text in ("", "   ", "\t \n"):
            self.assertEqual(len(self.tokenizer.tokenize(text)), 0)

    def test_blank_input_rejected(self):
        tokenizer = Tokenizer.from_settings(self.settings, reject_empty=True)
        with self.assertRaises(EmptyInputError) as ctx:
            tokenizer.tokenize("  ")
        self.assertEqual(ctx.exception.code, "L102")

    def test_unclassified_lexeme_recovered(self):
        tokens = self.tokenizer.tokenize("a @ b")
        self.assertEqual(tokens[1].kind, TokenKind.UNKNOWN)
        self.assertEqual(tokens[1].priority, 0)
        self.assertEqual(len(self.tokenizer.warnings), 1)
        self.assertEqual(self.tokenizer.warnings[0].code, "L103")
        self.assertEqual(self.tokenizer.warnings[0].diagnostic.location.column, 2)

    def test_unclassified_lexeme_without_recovery(self):
        tokenizer = Tokenizer(self.settings.rules, error_recovery=False)
        with self.assertRaises(UnclassifiedTokenError) as ctx:
            tokenizer.tokenize("a @ b")
        self.assertEqual(ctx.exception.lexeme, "@")
        self.assertEqual(ctx.exception.diagnostic.location.column, 2)

    def test_unknown_kind_rule_is_not_a_warning(self):
        rules = [PatternRule("^.$", TokenKind.UNKNOWN, 95)]
        tokenizer = Tokenizer(rules, error_recovery=False)
        tokens = tokenizer.tokenize("5")
        self.assertEqual(tokens[0].kind, TokenKind.UNKNOWN)
        self.assertEqual(tokens[0].priority, 95)
        self.assertEqual(tokenizer.warnings, [])

    def test_warnings_reset_between_calls(self):
        self.tokenizer.tokenize("@")
        self.tokenizer.tokenize("x")
        self.assertEqual(self.tokenizer.warnings, [])

    def test_diagnostics_include_pattern_errors(self):
        tokenizer = Tokenizer([PatternRule("(", TokenKind.OPERATOR, 1)])
        with self.assertLogs("rift.lexer.classifier", level="WARNING"):
            tokenizer.tokenize("(")
        codes = [d.code for d in tokenizer.get_diagnostics()]
        self.assertEqual(codes, ["L101", "L103"])
        self.assertEqual(len(tokenizer.pattern_errors), 1)

    def test_tokenize_string(self):
        rules = [PatternRule("[a-z]+", TokenKind.IDENTIFIER, 1)]
        tokens = tokenize_string("ab cd", rules)
        self.assertEqual(tokens.values(), ["ab", "cd"])

    def test_operand_and_operator_tokens(self):
        tokens = self.tokenizer.tokenize("a + 1 @")
        self.assertEqual([t.is_operand for t in tokens], [True, False, True, False])
        self.assertEqual([t.is_operator for t in tokens], [False, True, False, False])

    def test_dfa_states_do_not_affect_tokens(self):
        store = GovernanceStore(0)
        store.add("DFA_CONFIGURATION", "initial_state", "NUMBER")
        store.add("DFA_CONFIGURATION", "final_states", "OPERATOR")
        settings = TokenizerSettings.from_store(store)
        self.assertEqual(settings.initial_state, "NUMBER")
        self.assertEqual(settings.final_states, ("OPERATOR",))

        tokens = Tokenizer.from_settings(settings).tokenize("x + 2")
        self.assertEqual(tokens, self.tokenizer.tokenize("x + 2"))

    def test_stream_slicing(self):
        tokens = self.tokenizer.tokenize("a + b")
        tail = tokens[1:]
        self.assertIsInstance(tail, TokenStream)
        self.assertEqual(tail.values(), ["+", "b"])
        self.assertEqual(tail, list(tokens)[1:])


if __name__ == '__main__':
    unittest.main()
