"""
Tests for the source cursor.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from awkscript.lexer.cursor import Cursor, EOF_CHAR


class TestCursor(unittest.TestCase):

    def setUp(self):
        self.cursor = Cursor("abc")

    def test_peek_does_not_consume(self):
        self.assertEqual(self.cursor.peek(), "a")
        self.assertEqual(self.cursor.peek(2), "c")
        self.assertEqual(self.cursor.position, 0)

    def test_peek_past_end_returns_sentinel(self):
        self.assertEqual(self.cursor.peek(3), EOF_CHAR)
        self.assertEqual(self.cursor.peek(100), EOF_CHAR)
        self.assertEqual(Cursor("").peek(), EOF_CHAR)

    def test_peek_string_is_clamped(self):
        self.assertEqual(self.cursor.peek_string(2), "ab")
        self.assertEqual(self.cursor.peek_string(10), "abc")
        self.assertEqual(self.cursor.peek_string(0), "")
        self.cursor.skip(2)
        self.assertEqual(self.cursor.peek_string(2), "c")

    def test_consume_advances(self):
        self.assertEqual(self.cursor.consume(), "a")
        self.assertEqual(self.cursor.consume(), "b")
        self.assertEqual(self.cursor.position, 2)
        self.assertEqual(self.cursor.remainder(), "c")

    def test_consume_at_end(self):
        self.cursor.skip(3)
        self.assertTrue(self.cursor.is_at_end())
        self.assertEqual(self.cursor.consume(), EOF_CHAR)
        self.assertEqual(self.cursor.position, 3)

    def test_skip_is_clamped(self):
        self.cursor.skip(10)
        self.assertEqual(self.cursor.position, 3)
        self.assertTrue(self.cursor.is_at_end())
        self.assertEqual(self.cursor.remainder(), "")

    def test_position_never_decreases(self):
        self.cursor.skip(2)
        self.cursor.skip(-1)
        self.assertEqual(self.cursor.position, 2)

    def test_empty_source_is_at_end(self):
        self.assertTrue(Cursor("").is_at_end())


if __name__ == '__main__':
    unittest.main()
