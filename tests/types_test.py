# coding=UTF-8
#
# Copyright 2016 Google Inc. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import unittest

from ezconf.errors import ParseError
from ezconf.types import escape_key, escape_value, join_lines, quote_literal
from ezconf.util import is_identifier, strip_whitespace


class EscapeTest(unittest.TestCase):
    def test_escape_key(self):
        self.assertEqual(escape_key("plain key"), "plain key")
        self.assertEqual(escape_key("{}:;#\\"), "\\{\\}\\:\\;\\#\\\\")
        self.assertEqual(escape_key('".'), '".')

    def test_escape_value(self):
        self.assertEqual(escape_value('a "b" #c'), 'a \\"b\\" \\#c')

    def test_quote_literal(self):
        self.assertEqual(quote_literal("{}:;#"), '"{}:;#"')
        self.assertEqual(quote_literal('say "hi"'), '"say \\"hi\\""')
        self.assertEqual(quote_literal("C:\\temp"), '"C:\\temp"')


class JoinLinesTest(unittest.TestCase):
    def test_trims_every_line(self):
        self.assertEqual(join_lines("  a  \n   b \n c"), "a\nb\nc")

    def test_keeps_inner_blank_lines(self):
        self.assertEqual(join_lines("\n  a \n\n  b  \n"), "a\n\nb")

    def test_blank(self):
        self.assertEqual(join_lines(" \n \n"), "")


class UtilTest(unittest.TestCase):
    def test_is_identifier(self):
        self.assertTrue(is_identifier("abc123"))
        self.assertTrue(is_identifier("ÄÖü"))
        self.assertFalse(is_identifier(""))
        self.assertFalse(is_identifier("a b"))
        self.assertFalse(is_identifier("a.b"))
        self.assertFalse(is_identifier("a_b"))

    def test_strip_whitespace(self):
        self.assertEqual(strip_whitespace(" t es\tt "), "test")


class ParseErrorTest(unittest.TestCase):
    def test_message(self):
        error = ParseError("Broken.", 3, 7)
        self.assertEqual(str(error), "line 3, column 7: Broken.")
        self.assertEqual(error.msg, "Broken.")
        self.assertIsInstance(error, ValueError)

    def test_without_position(self):
        self.assertEqual(str(ParseError("Broken.")), "Broken.")


if __name__ == "__main__":
    unittest.main()
