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

import os
import tempfile
import unittest
from io import StringIO
from textwrap import dedent

import ezconf
from ezconf import ConfigurationBuilder, loads
from ezconf.writer import Writer, dump, dumps

import test_helpers


class WriterTest(unittest.TestCase, test_helpers.AssertLinesEqual):
    def assertWrites(self, configuration, text, pretty=False, escape_values=False):
        """Assert that the configuration is written as the given text."""
        string = StringIO()
        writer = Writer(string, pretty=pretty, escape_values=escape_values)
        writer.write(configuration)
        self.assertEqual(string.getvalue(), text)

    def test_compact(self):
        c = loads("a{b{k:1;}c{k:2;}}")
        self.assertWrites(c, 'a{b{k:"1";}c{k:"2";}}')

    def test_compact_escaped(self):
        c = loads("a{b{k:1;}c{k:2;}}")
        self.assertWrites(c, "a{b{k:1;}c{k:2;}}", escape_values=True)

    def test_pretty(self):
        c = loads("a{b{k:1;}c{k:2;}}")
        self.assertWrites(
            c,
            'a {\n    b {\n        k: "1";\n    }\n\n    c {\n        k: "2";\n    }\n}\n',
            pretty=True,
        )

    def test_pretty_keys_before_children(self):
        c = loads("a{ b{} k: v; }")
        self.assertWrites(c, 'a {\n    k: "v";\n\n    b {}\n}\n', pretty=True)

    def test_empty_groups(self):
        c = loads("e{} f{}")
        self.assertWrites(c, "e{}f{}")
        self.assertWrites(c, "e {}\n\nf {}\n", pretty=True)

    def test_empty_configuration(self):
        self.assertWrites(loads(""), "")
        self.assertWrites(loads(""), "", pretty=True)

    def test_special_characters(self):
        c = (
            ConfigurationBuilder()
            .add_root("test")
            .put("\\{};.:#", "\\{};.:#")
            .end_root()
            .build()
        )
        self.assertWrites(c, r'test{\\\{\}\;.\:\#:"\{};.:#";}')
        self.assertWrites(c, r"test{\\\{\}\;.\:\#:\\\{\}\;.\:\#;}", escape_values=True)

    def test_quotes(self):
        c = ConfigurationBuilder().add_root("t").put("k", 'say "hi"').end_root().build()
        self.assertWrites(c, r't{k:"say \"hi\"";}')
        self.assertWrites(c, r't{k:say \"hi\";}', escape_values=True)

    def test_multiline_value(self):
        c = ConfigurationBuilder().add_root("t").put("k", "a\nb").end_root().build()
        self.assertWrites(c, 't {\n    k: "a\n       b";\n}\n', pretty=True)
        self.assertWrites(c, "t {\n    k: a\n       b;\n}\n", pretty=True, escape_values=True)
        self.assertWrites(c, 't{k:"a\nb";}')

    def test_nested_pretty(self):
        c = ezconf.load(os.path.join(test_helpers.DATA, "Nested.ez"))
        expected = dedent(
            """\
            level1 {
                main: "exists";
                main_here: "exists";

                level2 {
                    key2: "exists";
                }

                level3 {
                    key3: "exists";
                }

                level4 {
                    key: "value";

                    level4a {
                        key4a: "exists
                               is
                               multiline";

                        level5a {
                            key: "value";
                        }
                    }
                }
            }
            """
        ).splitlines()
        self.assertLinesEqual(
            expected,
            test_helpers.write_to_lines(c, pretty=True),
            "Nested groups are not indented as expected",
        )

    def test_root_groups_keep_document_order(self):
        c = loads("b{} a{} c{}")
        self.assertWrites(c, "b{}a{}c{}")


class DumpTest(unittest.TestCase):
    def test_dumps(self):
        c = loads("a{k:v;}")
        self.assertEqual(dumps(c), 'a{k:"v";}')
        self.assertEqual(dumps(c, pretty=True), 'a {\n    k: "v";\n}\n')
        self.assertEqual(dumps(c, escape_values=True), "a{k:v;}")

    def test_dump_to_path(self):
        c = loads("grüße { k: ä; }")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "out.ez")
            dump(c, path, pretty=True)
            with open(path, encoding="utf-8") as f:
                self.assertEqual(f.read(), 'grüße {\n    k: "ä";\n}\n')
            self.assertEqual(ezconf.load(path), c)

    def test_dump_to_file_object(self):
        c = loads("a{k:v;}")
        string = StringIO()
        dump(c, string)
        self.assertEqual(string.getvalue(), 'a{k:"v";}')


if __name__ == "__main__":
    unittest.main()
