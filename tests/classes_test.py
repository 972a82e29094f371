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

from ezconf import loads
from ezconf.classes import Configuration, ConfigurationGroup
from ezconf.errors import EzConfError, GroupNotFoundError, InvariantError


class ConfigurationGroupTest(unittest.TestCase):
    def test_identifier(self):
        self.assertEqual(ConfigurationGroup("a.b.c").identifier, "c")
        self.assertEqual(ConfigurationGroup("root").identifier, "root")

    def test_values(self):
        group = ConfigurationGroup("test")
        group._add_key_value("a", "1")
        group._add_key_value("b", "2")
        self.assertEqual(group.get_value("a"), "1")
        self.assertIsNone(group.get_value("c"))
        self.assertEqual(group.find_value("b"), "2")
        self.assertTrue(group.key_exists("a"))
        self.assertFalse(group.key_exists("c"))
        self.assertIn("b", group)
        self.assertEqual(len(group), 2)
        self.assertEqual(list(group), [("a", "1"), ("b", "2")])
        self.assertEqual(dict(group.items), {"a": "1", "b": "2"})

    def test_items_are_read_only(self):
        group = ConfigurationGroup("test")
        group._add_key_value("a", "1")
        with self.assertRaises(TypeError):
            group.items["a"] = "2"

    def test_duplicate_key(self):
        group = ConfigurationGroup("test")
        group._add_key_value("a", "1")
        with self.assertRaises(InvariantError):
            group._add_key_value("a", "2")
        self.assertEqual(group.get_value("a"), "1")

    def test_children(self):
        group = ConfigurationGroup("test")
        child = ConfigurationGroup("test.child")
        group._add_child(child)
        self.assertEqual(group.children, (child,))

    def test_equality_ignores_child_order(self):
        c1 = loads("a { x { k: 1; } y { k: 2; } }")
        c2 = loads("a { y { k: 2; } x { k: 1; } }")
        self.assertEqual(c1.get_group("a"), c2.get_group("a"))
        self.assertEqual(hash(c1.get_group("a")), hash(c2.get_group("a")))
        self.assertEqual(c1, c2)

    def test_inequality(self):
        c1 = loads("a { k: 1; }")
        self.assertNotEqual(c1, loads("a { k: 2; }"))
        self.assertNotEqual(c1, loads("a { k: 1; b {} }"))
        self.assertNotEqual(c1, loads("b { k: 1; }"))
        self.assertNotEqual(c1.get_group("a"), "a")


class ConfigurationTest(unittest.TestCase):
    def setUp(self):
        self.configuration = loads(
            "root { nested { key: value; } } secondRoot { key: other; }"
        )

    def test_groups(self):
        c = self.configuration
        self.assertEqual(c.group_count, 3)
        self.assertEqual(len(c), 3)
        self.assertEqual(c.root_group_count, 2)
        self.assertEqual(
            [g.path for g in c.root_groups], ["root", "secondRoot"]
        )
        self.assertTrue(c.group_exists("root.nested"))
        self.assertIn("secondRoot", c)
        self.assertFalse(c.group_exists("nested"))
        self.assertIsNone(c.get_group("root.missing"))
        self.assertIs(c.find_group("root.nested"), c.get_group("root.nested"))

    def test_get_value(self):
        c = self.configuration
        self.assertEqual(c.get_value("root.nested#key"), "value")
        self.assertEqual(c.find_value("secondRoot#key"), "other")
        self.assertIsNone(c.get_value("root#key"))

    def test_get_value_missing_group(self):
        with self.assertRaises(GroupNotFoundError) as cm:
            self.configuration.get_value("nothere#key")
        self.assertEqual(cm.exception.path, "nothere")
        self.assertIsInstance(cm.exception, LookupError)
        self.assertIsInstance(cm.exception, EzConfError)

    def test_get_value_malformed_query(self):
        with self.assertRaises(InvariantError):
            self.configuration.get_value("#key")
        with self.assertRaises(InvariantError):
            self.configuration.get_value("root.nested")

    def test_duplicate_path(self):
        configuration = Configuration()
        configuration._add_group("a", ConfigurationGroup("a"))
        with self.assertRaises(InvariantError):
            configuration._add_group("a", ConfigurationGroup("a"))

    def test_hash(self):
        other = loads("secondRoot { key: other; } root { nested { key: value; } }")
        self.assertEqual(self.configuration, other)
        self.assertEqual(hash(self.configuration), hash(other))


if __name__ == "__main__":
    unittest.main()
