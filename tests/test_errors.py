"""
Tests for lexer diagnostics.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from awkscript.lexer.tokens import SourceLocation
from awkscript.lexer.errors import (
    Diagnostic, LexerError, UnrecognizedCharacterError, UnterminatedLiteralError,
    ERROR_CODES, suggest_symbol_alternatives,
    create_unrecognized_character_error, create_unterminated_literal_error,
    create_number_warning,
)


class TestDiagnostics(unittest.TestCase):

    def setUp(self):
        self.location = SourceLocation("prog.awk", 4, 2, 30)

    def test_unrecognized_character(self):
        error = create_unrecognized_character_error("@", self.location)
        self.assertIsInstance(error, LexerError)
        self.assertEqual(error.char, "@")
        self.assertEqual((error.line, error.column), (4, 2))
        text = str(error)
        self.assertTrue(text.startswith("error[L001] prog.awk:4:2: Unrecognized character: '@'\n"), text)
        self.assertIn("  = help: ", text)

    def test_non_printable_character(self):
        error = create_unrecognized_character_error("\x07", self.location)
        self.assertIn("U+0007", error.diagnostic.help_text)

    def test_unterminated_literal(self):
        start = SourceLocation("prog.awk", 4, 0, 28)
        error = create_unterminated_literal_error('"', self.location, start)
        self.assertIsInstance(error, UnterminatedLiteralError)
        self.assertEqual(error.start, start)
        self.assertEqual(error.code, "L002")
        self.assertIn("line 4, column 0", error.diagnostic.help_text)
        self.assertIn("Unterminated string literal", str(error))

    def test_number_warning(self):
        warning = create_number_warning("1.2.3", self.location)
        self.assertEqual(warning.severity, "warning")
        self.assertIsInstance(warning, Diagnostic)
        self.assertNotIsInstance(warning, Exception)
        self.assertEqual((warning.line, warning.column), (4, 2))
        self.assertTrue(str(warning).startswith("warning[L003] prog.awk:4:2: "))
        self.assertIn("2 decimal points", str(warning))

    def test_error_wraps_diagnostic(self):
        error = create_unrecognized_character_error("@", self.location)
        self.assertEqual(error.diagnostic.severity, "error")
        self.assertEqual(error.location, self.location)
        self.assertEqual(error.args, ("Unrecognized character: '@'",))

    def test_codes_are_registered(self):
        for code in ("L001", "L002", "L003"):
            self.assertIn(code, ERROR_CODES)

    def test_errors_are_catchable_as_base(self):
        with self.assertRaises(LexerError):
            raise UnrecognizedCharacterError("&", self.location)


class TestSuggestions(unittest.TestCase):

    def test_prefix_of_two_char_symbols(self):
        self.assertEqual(suggest_symbol_alternatives("&"), ("&&",))
        self.assertEqual(suggest_symbol_alternatives("!"), ("!=", "!~", "!"))

    def test_no_suggestion(self):
        self.assertEqual(suggest_symbol_alternatives("@"), ())


if __name__ == '__main__':
    unittest.main()
