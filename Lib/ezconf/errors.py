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

from __future__ import annotations

from typing import Optional

__all__ = [
    "EzConfError",
    "ParseError",
    "InvariantError",
    "GroupNotFoundError",
    "BuilderStateError",
]


class EzConfError(Exception):
    """Base class for all errors raised by ezconf."""


class ParseError(EzConfError, ValueError):
    """The input text is not well-formed.

    Attributes:
        line (int): 1-based line number where the error was detected, or None
            when the error is only detected at the end of the document.
        column (int): 1-based position within the stripped line, or None.
        msg (str): the bare message without the position prefix.
    """

    def __init__(
        self, msg: str, line: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        self.msg = msg
        self.line = line
        self.column = column
        if line is None:
            text = msg
        else:
            text = f"line {line}, column {column}: {msg}"
        ValueError.__init__(self, text)


class InvariantError(EzConfError, ValueError):
    """A data model invariant would be broken (duplicate key or path,
    malformed query, invalid identifier, blank key or value)."""


class GroupNotFoundError(EzConfError, LookupError):
    """A query refers to a group that does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        LookupError.__init__(self, f"Group: '{path}' does not exist.")


class BuilderStateError(EzConfError, RuntimeError):
    """The builder API has been called out of order."""
