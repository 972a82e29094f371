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

"""Build Configuration objects from code instead of text.

Example::

    configuration = (
        ConfigurationBuilder()
        .add_root("level1")
            .put("main", "exists")
            .add_child("level2")
                .put("key2", "exists")
            .end_child()
            .add_child("level4")
                .put("key4", "exists\\nis\\nmultiline")
            .end_child()
        .end_root()
        .build()
    )

Pretty-printed, this gives::

    level1 {
        main: "exists";

        level2 {
            key2: "exists";
        }

        level4 {
            key4: "exists
                   is
                   multiline";
        }
    }
"""

from __future__ import annotations

from typing import List

from ezconf.classes import Configuration, ConfigurationGroup
from ezconf.errors import BuilderStateError, InvariantError
from ezconf.types import PATH_SEPARATOR, join_lines
from ezconf.util import LoggerMixin, is_identifier_char

__all__ = ["ConfigurationBuilder", "GroupBuilderContext"]


def _validate_name(name: str) -> None:
    if name is None:
        raise TypeError("Group name must not be None.")
    if not name.strip():
        raise InvariantError("Group name should not be empty.")
    for c in name:
        if c.isspace():
            raise InvariantError("Whitespace is not allowed for group name.")
        if not is_identifier_char(c):
            raise InvariantError(
                "Character in group name must be digit or letter. "
                f"Encountered: '{c}' in '{name}'"
            )


class GroupBuilderContext(LoggerMixin):
    """Adds key:value pairs and nested groups below the currently open
    group. Obtained from `ConfigurationBuilder.add_root`."""

    def __init__(
        self, builder: ConfigurationBuilder, configuration: Configuration
    ) -> None:
        self._builder = builder
        self._configuration = configuration
        self._groups: List[ConfigurationGroup] = []
        self._path: List[str] = []

    @property
    def path(self) -> str:
        """Path of the currently open group."""
        return self._groups[-1].path

    def put(self, key: str, value: str) -> GroupBuilderContext:
        if key is None:
            raise TypeError("Key must not be None.")
        if value is None:
            raise TypeError(f"Value for '{key}' must not be None.")
        # Values are stored the way the parser reads them back: universal
        # newlines, every line trimmed.
        k = key.strip()
        v = join_lines(value.replace("\r\n", "\n").replace("\r", "\n"))
        if not k:
            raise InvariantError(
                f"Key is blank for value: '{v}'. Blank keys are not permitted."
            )
        if "\n" in k or "\r" in k:
            raise InvariantError(f"Key is not permitted to be multiline: '{k}'")
        if not v:
            raise InvariantError(
                f"Value is blank for key: '{k}'. Blank values are not permitted."
            )
        self._groups[-1]._add_key_value(k, v)
        return self

    def add_child(self, name: str) -> GroupBuilderContext:
        _validate_name(name)
        self._push(name)
        return self

    def end_child(self) -> GroupBuilderContext:
        if len(self._groups) == 1:
            raise BuilderStateError(
                f"Cannot end child while in root. Current path: '{self.path}'"
            )
        self._pop()
        return self

    def end_root(self) -> ConfigurationBuilder:
        if len(self._groups) != 1:
            raise BuilderStateError(
                f"Cannot end root while still in child. Current path: '{self.path}'"
            )
        self._pop()
        return self._builder

    def _push(self, name: str) -> None:
        path = PATH_SEPARATOR.join(self._path + [name])
        group = ConfigurationGroup(path)
        self._configuration._add_group(path, group)
        if self._groups:
            self._groups[-1]._add_child(group)
        self._groups.append(group)
        self._path.append(name)
        self.logger.debug("Added group '%s'", path)

    def _pop(self) -> None:
        self._groups.pop()
        self._path.pop()


class ConfigurationBuilder(LoggerMixin):
    """Fluent API to create a Configuration without parsing text."""

    def __init__(self) -> None:
        self._configuration = Configuration()
        self._context = GroupBuilderContext(self, self._configuration)
        self._built = False

    def add_root(self, name: str) -> GroupBuilderContext:
        """Add a root group and return the context to fill it."""
        _validate_name(name)
        if self._context._groups:
            raise BuilderStateError(
                f"Cannot add root '{name}' while '{self._context.path}' is open."
            )
        self._context._push(name)
        return self._context

    def build(self) -> Configuration:
        """Return the configuration. The builder cannot be used afterwards."""
        if self._built:
            raise BuilderStateError("Builder has already been closed with 'build()'.")
        self._built = True
        self.logger.info(
            "Built configuration with %d groups", self._configuration.group_count
        )
        return self._configuration
