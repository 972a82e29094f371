# Copyright 2015 Google Inc. All Rights Reserved.
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

"""Reserved characters of the format and the escaping shared by the parser
and the writer."""

from __future__ import annotations

from typing import Dict

__all__ = [
    "BEGIN_GROUP",
    "END_GROUP",
    "KV_SEPARATOR",
    "ESCAPE",
    "COMMENT",
    "VALUE_END",
    "LITERAL",
    "PATH_SEPARATOR",
    "QUERY_SEPARATOR",
    "INDENT",
    "escape_key",
    "escape_value",
    "quote_literal",
    "join_lines",
]

BEGIN_GROUP = "{"
END_GROUP = "}"
KV_SEPARATOR = ":"
ESCAPE = "\\"
COMMENT = "#"
VALUE_END = ";"
LITERAL = '"'

PATH_SEPARATOR = "."
QUERY_SEPARATOR = "#"

INDENT = "    "

# Outside of a literal every structural character needs a backslash.
KEY_ESCAPES: Dict[str, str] = {
    c: ESCAPE + c
    for c in (BEGIN_GROUP, END_GROUP, KV_SEPARATOR, ESCAPE, COMMENT, VALUE_END)
}

VALUE_ESCAPES: Dict[str, str] = dict(KEY_ESCAPES)
VALUE_ESCAPES[LITERAL] = ESCAPE + LITERAL

# Inside a literal only the quote itself is escaped. A backslash is written
# as is, so a value ending in a backslash does not survive the round trip.
LITERAL_ESCAPES: Dict[str, str] = {LITERAL: ESCAPE + LITERAL}


def _escaped(mapping: Dict[str, str], text: str) -> str:
    return "".join(mapping.get(c, c) for c in text)


def escape_key(key: str) -> str:
    """Escape a key or a group identifier."""
    return _escaped(KEY_ESCAPES, key)


def escape_value(value: str) -> str:
    """Escape a value so that it can be written without quotes."""
    return _escaped(VALUE_ESCAPES, value)


def quote_literal(value: str) -> str:
    """Return the value as a quoted literal."""
    return LITERAL + _escaped(LITERAL_ESCAPES, value) + LITERAL


def join_lines(text: str) -> str:
    """Trim every line of a value on its own and drop the blank lines
    surrounding it.

    >>> join_lines("  a \\n\\n  b  \\n")
    'a\\n\\nb'
    """
    return "\n".join(line.strip() for line in text.strip().split("\n"))
