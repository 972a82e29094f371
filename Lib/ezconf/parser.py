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

"""The EZConf parser.

Syntax::

    GROUP_IDENTIFIER {
        KEY: VALUE;
        KEY: VALUE;

        # I'm a comment

        KEY: \\{\\}\\#\\:\\;\\\\
             escaped chars and multiline value;

        KEY: "A literal! \\"
              Can also be multiline!";

        GROUP_IDENTIFIER {
            ...
        }
    }

- Group identifiers consist of letters and digits only. They cannot span
  lines and whitespace inside them is skipped (``T OM {}`` is ``TOM``).
- Keys are trimmed, cannot be blank, cannot span lines and must be unique
  within their group.
- Values are trimmed line by line, cannot be blank and can span lines.
- A value whose first non-whitespace character is ``"`` is a literal: only
  ``"`` has to be escaped inside it and it must be followed by ``;``.
- Outside of literals ``{ } : ; # \\`` must be escaped with ``\\``.
- ``#`` starts a comment that runs to the end of the line.
"""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Callable, Dict, Iterable, List, Optional, Union
import logging
import sys

from fontTools.misc.textTools import tostr

import ezconf
from ezconf.classes import Configuration, ConfigurationGroup
from ezconf.errors import InvariantError, ParseError
from ezconf.types import (
    BEGIN_GROUP,
    COMMENT,
    END_GROUP,
    ESCAPE,
    KV_SEPARATOR,
    LITERAL,
    PATH_SEPARATOR,
    VALUE_END,
    join_lines,
)
from ezconf.util import is_identifier, is_identifier_char, strip_whitespace

__all__ = ["Parser", "State", "load", "loads"]

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class State(Enum):
    UNDEFINED = "UNDEFINED"
    IN_GROUP = "IN_GROUP"
    IN_VALUE = "IN_VALUE"
    IN_LITERAL = "IN_LITERAL"


class _Context:
    """Everything that changes while a single document is parsed."""

    def __init__(self) -> None:
        self.configuration = Configuration()
        self.state = State.UNDEFINED
        self.groups: List[ConfigurationGroup] = []
        self.paths: List[str] = []
        self.buffer: List[str] = []
        self.key: Optional[str] = None
        self.text = ""
        self.lineno = 0
        self.pos = 0

    def error(self, msg: str) -> ParseError:
        return ParseError(msg, self.lineno, self.pos + 1)

    def take(self) -> str:
        """Consume the character following an escape."""
        self.pos += 1
        if self.pos >= len(self.text):
            raise self.error("Escape character cannot end a line.")
        return self.text[self.pos]

    def peek(self) -> Optional[str]:
        if self.pos + 1 < len(self.text):
            return self.text[self.pos + 1]
        return None

    def flush(self) -> str:
        content = "".join(self.buffer)
        self.buffer.clear()
        return content

    def pending(self) -> str:
        return "".join(self.buffer)

    def strip_trailing_whitespace(self) -> None:
        while self.buffer and self.buffer[-1].isspace():
            self.buffer.pop()

    def register(self, func: Callable[..., None], *args) -> None:
        # Add the position to invariant violations found while parsing.
        try:
            func(*args)
        except InvariantError as e:
            raise InvariantError(
                f"line {self.lineno}, column {self.pos + 1}: {e}"
            ) from e


class Parser:
    """Parses EZConf documents into Configuration objects.

    A parser only holds the charset used to decode bytes, so one instance
    can be shared freely; every call to `parse` starts from a clean state.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def parse(self, text: Union[str, bytes]) -> Configuration:
        if isinstance(text, bytes):
            text = tostr(text, encoding=self._encoding)
        return self.parse_lines(StringIO(text, newline=None))

    def parse_lines(self, lines: Iterable[str]) -> Configuration:
        """Parse a document given as an iterable of physical lines."""
        ctx = _Context()
        for line in lines:
            ctx.lineno += 1
            # Line breaks are kept inside (literal) values only.
            if ctx.state in (State.IN_VALUE, State.IN_LITERAL):
                ctx.buffer.append("\n")
            ctx.text = line.strip()
            self._parse_line(ctx)
        self._finish(ctx)
        return ctx.configuration

    def _parse_line(self, ctx: _Context) -> None:
        ctx.pos = 0
        while ctx.pos < len(ctx.text):
            c = ctx.text[ctx.pos]
            if c == COMMENT and ctx.state is not State.IN_LITERAL:
                ctx.strip_trailing_whitespace()
                break
            ctx.state = self.handlers[ctx.state](self, ctx, c)
            ctx.pos += 1

        if ctx.state in (State.UNDEFINED, State.IN_GROUP):
            pending = ctx.flush().strip()
            if pending:
                ctx.pos = len(ctx.text)
                if ctx.state is State.UNDEFINED:
                    raise ctx.error(f"Group identifier cannot be multiline: '{pending}'")
                raise ctx.error(
                    f"Group identifier or key cannot be multiline: '{pending}'"
                )

    def _finish(self, ctx: _Context) -> None:
        if ctx.state is State.UNDEFINED:
            return
        if ctx.state is State.IN_LITERAL:
            reason = f"String literal for key '{ctx.key}' has not been closed."
        elif ctx.state is State.IN_VALUE:
            reason = f"Value for key '{ctx.key}' has not been terminated."
        else:
            reason = f"Group '{ctx.groups[-1].path}' has not been closed."
        raise ParseError(
            f"Document end reached in state {ctx.state.name}, should be "
            f"UNDEFINED. {reason}",
            ctx.lineno,
            len(ctx.text) + 1,
        )

    # state handlers, each returns the next state

    def _undefined(self, ctx: _Context, c: str) -> State:
        if c == BEGIN_GROUP:
            identifier = ctx.flush()
            if not identifier:
                raise ctx.error("Group identifiers are not permitted to be blank.")
            ctx.paths.append(identifier)
            ctx.groups.append(ConfigurationGroup(identifier))
            logger.debug("Opened root group '%s'", identifier)
            return State.IN_GROUP
        if c.isspace():
            return State.UNDEFINED
        if c == END_GROUP:
            raise ctx.error("Cannot end a group outside of any group.")
        if not is_identifier_char(c):
            raise ctx.error(
                "Group identifier must consist of letters and digits: "
                f"'{ctx.pending()}{c}'"
            )
        ctx.buffer.append(c)
        return State.UNDEFINED

    def _in_group(self, ctx: _Context, c: str) -> State:
        if c == ESCAPE:
            ctx.buffer.append(ctx.take())
        elif c == KV_SEPARATOR:
            key = ctx.flush().strip()
            if not key:
                raise ctx.error("Keys are not permitted to be blank.")
            ctx.key = key
            return State.IN_VALUE
        elif c == BEGIN_GROUP:
            self._open_child(ctx)
        elif c == END_GROUP:
            return self._close_group(ctx)
        else:
            ctx.buffer.append(c)
        return State.IN_GROUP

    def _in_value(self, ctx: _Context, c: str) -> State:
        if c == ESCAPE:
            ctx.buffer.append(ctx.take())
        elif c == VALUE_END:
            self._close_value(ctx)
            return State.IN_GROUP
        elif c == LITERAL:
            if ctx.pending().strip():
                raise ctx.error("Cannot start a literal after non-literal content.")
            ctx.buffer.clear()
            return State.IN_LITERAL
        else:
            ctx.buffer.append(c)
        return State.IN_VALUE

    def _in_literal(self, ctx: _Context, c: str) -> State:
        if c == ESCAPE and ctx.peek() == LITERAL:
            ctx.buffer.append(ctx.take())
        elif c != LITERAL:
            ctx.buffer.append(c)
        elif ctx.peek() != VALUE_END:
            raise ctx.error(
                "Closing literal must be followed by ';'. (Unescaped literal "
                "in value?)"
            )
        else:
            self._close_value(ctx)
            ctx.pos += 1
            return State.IN_GROUP
        return State.IN_LITERAL

    handlers: Dict[State, Callable[[Parser, _Context, str], State]] = {
        State.UNDEFINED: _undefined,
        State.IN_GROUP: _in_group,
        State.IN_VALUE: _in_value,
        State.IN_LITERAL: _in_literal,
    }

    # transitions shared by several states

    def _open_child(self, ctx: _Context) -> None:
        raw = ctx.flush()
        identifier = strip_whitespace(raw)
        if not identifier:
            raise ctx.error("Group identifiers are not permitted to be blank.")
        if not is_identifier(identifier):
            raise ctx.error(
                f"Group identifier must consist of letters and digits: '{raw.strip()}'"
            )
        ctx.paths.append(identifier)
        group = ConfigurationGroup(PATH_SEPARATOR.join(ctx.paths))
        ctx.groups[-1]._add_child(group)
        ctx.groups.append(group)
        logger.debug("Opened group '%s'", group.path)

    def _close_group(self, ctx: _Context) -> State:
        group = ctx.groups[-1]
        pending = ctx.flush().strip()
        if pending:
            raise ctx.error(
                f"Key '{pending}' has no value before the end of group "
                f"'{group.path}'."
            )
        ctx.paths.pop()
        ctx.groups.pop()
        ctx.register(ctx.configuration._add_group, group.path, group)
        return State.IN_GROUP if ctx.groups else State.UNDEFINED

    def _close_value(self, ctx: _Context) -> None:
        value = join_lines(ctx.flush())
        if not value:
            raise ctx.error("Values are not permitted to be blank.")
        ctx.register(ctx.groups[-1]._add_key_value, ctx.key, value)
        ctx.key = None


def load(file_or_path, encoding=DEFAULT_ENCODING):
    """Read an EZConf document. 'file_or_path' should be a (readable) file
    object, text or binary, or a file name.
    Return a Configuration object.
    """
    logger.info("Parsing EZConf file")
    p = Parser(encoding=encoding)
    if hasattr(file_or_path, "read"):
        return p.parse(file_or_path.read())
    with open(file_or_path, "r", encoding=encoding) as fp:
        return p.parse_lines(fp)


def loads(s: Union[str, bytes], encoding: str = DEFAULT_ENCODING) -> Configuration:
    """Read an EZConf document from a (unicode) str object, or from
    a bytes object in the given encoding.
    Return a Configuration object.
    """
    logger.info("Parsing EZConf document")
    return Parser(encoding=encoding).parse(s)


def main(args=None):
    """Roundtrip the EZConf files given as arguments."""
    if args is None:
        args = sys.argv[1:]
    for arg in args:
        ezconf.dump(load(arg), sys.stdout, pretty=True)


if __name__ == "__main__":
    main(sys.argv[1:])
