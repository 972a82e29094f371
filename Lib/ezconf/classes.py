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

import logging
from types import MappingProxyType
from typing import Dict, Iterator, KeysView, List, Mapping, Optional, Tuple, ValuesView

from ezconf.errors import GroupNotFoundError, InvariantError
from ezconf.types import PATH_SEPARATOR, QUERY_SEPARATOR

__all__ = ["Configuration", "ConfigurationGroup"]

logger = logging.getLogger(__name__)


class ConfigurationGroup:
    """A node holding key:value pairs and child groups.

    A group is referenced by its path, the identifiers of its ancestors and
    its own identifier joined with a dot (``root.nested``).

    Groups are filled by the parser or the builder through the private
    ``_add_*`` methods and must be treated as read-only afterwards.
    """

    __slots__ = "_path", "_values", "_children"

    def __init__(self, path: str) -> None:
        self._path: str = path
        self._values: Dict[str, str] = {}
        self._children: List[ConfigurationGroup] = []

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} "{self._path}">'

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__} [path={self._path}, "
            f"values={self._values}, children={self._children}]"
        )

    @property
    def path(self) -> str:
        return self._path

    @property
    def identifier(self) -> str:
        """The last segment of the path."""
        return self._path.rpartition(PATH_SEPARATOR)[2]

    @property
    def keys(self) -> KeysView[str]:
        return self._values.keys()

    @property
    def values(self) -> ValuesView[str]:
        return self._values.values()

    @property
    def items(self) -> Mapping[str, str]:
        """Read-only view of the key:value pairs."""
        return MappingProxyType(self._values)

    @property
    def children(self) -> Tuple[ConfigurationGroup, ...]:
        return tuple(self._children)

    def get_value(self, key: str) -> Optional[str]:
        """Return the value for key, or None if the key does not exist."""
        return self._values.get(key)

    find_value = get_value

    def key_exists(self, key: str) -> bool:
        return key in self._values

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._values.items())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ConfigurationGroup):
            return NotImplemented
        # Child order only matters for serialization.
        return (
            self._path == other._path
            and self._values == other._values
            and {c.path: c for c in self._children}
            == {c.path: c for c in other._children}
        )

    def __hash__(self) -> int:
        return hash(self._path)

    def _add_key_value(self, key: str, value: str) -> None:
        if key in self._values:
            raise InvariantError(
                f"key: '{key}' is already present in group '{self._path}'."
            )
        self._values[key] = value

    def _add_child(self, child: ConfigurationGroup) -> None:
        self._children.append(child)


class Configuration:
    """All the groups of one parsed (or built) document.

    Groups are looked up by path::

        root {
            nested {}
        }

        secondRoot {
            key: value;
        }

    ``get_group("root.nested")`` returns the nested group and
    ``get_value("secondRoot#key")`` returns ``"value"``.
    """

    __slots__ = "_groups", "_roots"

    def __init__(self) -> None:
        self._groups: Dict[str, ConfigurationGroup] = {}
        self._roots: List[ConfigurationGroup] = []

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self._groups)} groups>"

    def __str__(self) -> str:
        return f"{self.__class__.__name__} [groups={self._groups}]"

    def __iter__(self) -> Iterator[ConfigurationGroup]:
        return iter(self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, path: str) -> bool:
        return path in self._groups

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._groups == other._groups

    def __hash__(self) -> int:
        return hash(frozenset(self._groups))

    @property
    def root_groups(self) -> Tuple[ConfigurationGroup, ...]:
        return tuple(self._roots)

    @property
    def group_count(self) -> int:
        """Number of groups, nested ones included."""
        return len(self._groups)

    @property
    def root_group_count(self) -> int:
        return len(self._roots)

    def get_group(self, path: str) -> Optional[ConfigurationGroup]:
        return self._groups.get(path)

    find_group = get_group

    def group_exists(self, path: str) -> bool:
        return path in self._groups

    def get_value(self, query: str) -> Optional[str]:
        """Look up a value with a ``<group>(.<subgroup>)*#key`` query.

        Returns None if the group exists but has no such key.

        Raises:
            InvariantError: if the query is malformed.
            GroupNotFoundError: if the group part of the query does not exist.
        """
        if query.startswith(QUERY_SEPARATOR):
            raise InvariantError(
                f"Invalid query: '{query}'. Queries cannot start with "
                f"'{QUERY_SEPARATOR}'"
            )
        path, sep, key = query.partition(QUERY_SEPARATOR)
        if not sep:
            raise InvariantError(
                f"Invalid query: '{query}'. Queries must be in this format: "
                "'<group>(.<subgroup>)*#key'"
            )
        group = self._groups.get(path)
        if group is None:
            raise GroupNotFoundError(path)
        return group.get_value(key)

    find_value = get_value

    def _add_group(self, path: str, group: ConfigurationGroup) -> None:
        if path in self._groups:
            raise InvariantError(f"Can't add group: '{path}'. Path already exists.")
        if PATH_SEPARATOR not in path:
            self._roots.append(group)
        self._groups[path] = group
        logger.debug("Registered group '%s'", path)
