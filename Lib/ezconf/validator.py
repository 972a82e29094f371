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

"""Declarative checks over a parsed Configuration.

A value validator is a callable taking the value string and returning None
when the value is fine, or a message describing the problem. A rule is a
callable taking the whole Configuration and returning a list of messages.

    context = (
        ConfigurationValidator()
        .require_groups("server", "server.tls")
        .require_keys("server", "host", "port")
        .values_match_in_group(IS_INT, "server", "port")
        .build()
    )
    result = context.validate(configuration)
    if not result.is_valid:
        print("\\n".join(result.issues))
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple, Union
import re

from ezconf.classes import Configuration, ConfigurationGroup
from ezconf.util import LoggerMixin

__all__ = [
    "ConfigurationValidator",
    "ValidationContext",
    "ValidationResult",
    "IS_BYTE",
    "IS_SHORT",
    "IS_INT",
    "IS_LONG",
    "IS_FLOAT",
    "IS_DOUBLE",
    "IS_BOOLEAN",
    "IS_MAP",
    "pattern_validator",
]

Validate = Callable[[str], Optional[str]]
ValidationRule = Callable[[Configuration], List[str]]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _integer_validator(type_name: str, bits: int) -> Validate:
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1

    def validate(value):
        if value is None:
            return f"{type_name} value is None"
        if _INTEGER_RE.fullmatch(value) is None or not low <= int(value) <= high:
            return f"Invalid type for {type_name}: '{value}'"
        return None

    return validate


def _float_validator(type_name: str) -> Validate:
    def validate(value):
        if value is None:
            return f"{type_name} value is None"
        try:
            float(value)
        except ValueError:
            return f"Invalid type for {type_name}: '{value}'"
        return None

    return validate


IS_BYTE = _integer_validator("byte", 8)
IS_SHORT = _integer_validator("short", 16)
IS_INT = _integer_validator("int", 32)
IS_LONG = _integer_validator("long", 64)
IS_FLOAT = _float_validator("float")
IS_DOUBLE = _float_validator("double")


def IS_BOOLEAN(value):
    if value is None:
        return "Boolean value is None"
    if value.lower() in ("true", "false"):
        return None
    return f"Invalid boolean: '{value}' must be (true|false)"


def IS_MAP(value):
    """A map is a multiline value alternating keys and values, one per line::

        map: a
             b
             c
             d;
    """
    if value is None:
        return "Map input value is None"
    if len(value.splitlines()) % 2 != 0:
        return "Map requires an even number of lines in a multi-line value."
    return None


def pattern_validator(pattern: Union[str, re.Pattern]) -> Validate:
    """Return a validator accepting values fully matched by pattern."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    def validate(value):
        if pattern.fullmatch(value) is None:
            return f"Input: '{value}' does not match pattern: {pattern.pattern}"
        return None

    return validate


class ValidationResult:
    """Outcome of `ValidationContext.validate`."""

    def __init__(self, issues: Sequence[str] = ()) -> None:
        self._issues: Tuple[str, ...] = tuple(issues)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self._issues)} issues>"

    @property
    def is_valid(self) -> bool:
        return not self._issues

    @property
    def issues(self) -> Tuple[str, ...]:
        return self._issues


class ValidationContext(LoggerMixin):
    """An immutable set of rules, created by `ConfigurationValidator.build`."""

    def __init__(self, rules: Sequence[ValidationRule]) -> None:
        self._rules: Tuple[ValidationRule, ...] = tuple(rules)

    def validate(self, configuration: Configuration) -> ValidationResult:
        if configuration is None:
            raise TypeError("configuration must not be None")
        issues: List[str] = []
        for rule in self._rules:
            found = rule(configuration)
            if found is None:
                raise TypeError(f"validation rule {rule!r} returned None")
            issues.extend(found)
        self.logger.debug(
            "Validated configuration against %d rules: %d issues",
            len(self._rules),
            len(issues),
        )
        return ValidationResult(issues)


def _missing_group(group: str) -> str:
    return f"Group: '{group}' does not exist."


def _check_value(
    validator: Validate, group: ConfigurationGroup, key: str, value: str
) -> Optional[str]:
    message = validator(value)
    if message is not None:
        return f"Invalid @ {group.path}: {key} -> {message}"
    return None


def _require_some(name: str, items: Sequence[str]) -> None:
    if not items:
        raise ValueError(f"{name} must contain at least one identifier")
    for item in items:
        if item is None:
            raise TypeError(f"{name} must not contain None")


class ConfigurationValidator:
    """Collects validation rules and builds `ValidationContext` objects.

    The validator can still be changed after `build`; contexts built
    earlier keep the rules they were built with.
    """

    def __init__(self) -> None:
        self._rules: List[ValidationRule] = []

    def custom_rule(self, rule: ValidationRule) -> ConfigurationValidator:
        if rule is None:
            raise TypeError("rule must not be None")
        self._rules.append(rule)
        return self

    def values_match_in_group(
        self, validator: Validate, group: str, *keys: str
    ) -> ConfigurationValidator:
        """Check the listed keys of a group with validator; check every
        value of the group when no key is given."""
        if validator is None or group is None:
            raise TypeError("validator and group must not be None")
        for key in keys:
            if key is None:
                raise TypeError("keys must not contain None")

        def rule(configuration):
            g = configuration.get_group(group)
            if g is None:
                return [_missing_group(group)]
            issues = []
            if keys:
                for key in keys:
                    value = g.get_value(key)
                    if value is None:
                        issues.append(f"{group}#{key}: does not exist.")
                        continue
                    message = _check_value(validator, g, key, value)
                    if message is not None:
                        issues.append(message)
            else:
                for key, value in g:
                    message = _check_value(validator, g, key, value)
                    if message is not None:
                        issues.append(message)
            return issues

        self._rules.append(rule)
        return self

    def values_match_recursively(
        self, validator: Validate, *groups: str
    ) -> ConfigurationValidator:
        """Check every value of the groups and of all their descendants."""
        if validator is None:
            raise TypeError("validator must not be None")
        _require_some("groups", groups)

        def collect(g, issues):
            for key, value in g:
                message = _check_value(validator, g, key, value)
                if message is not None:
                    issues.append(message)
            for child in g.children:
                collect(child, issues)

        def rule(configuration):
            issues = []
            for group in groups:
                g = configuration.get_group(group)
                if g is None:
                    issues.append(_missing_group(group))
                    continue
                collect(g, issues)
            return issues

        self._rules.append(rule)
        return self

    def require_groups(self, *groups: str) -> ConfigurationValidator:
        _require_some("groups", groups)

        def rule(configuration):
            return [
                f"Group does not exist: '{group}'"
                for group in groups
                if not configuration.group_exists(group)
            ]

        self._rules.append(rule)
        return self

    def require_keys(self, group: str, *keys: str) -> ConfigurationValidator:
        if group is None:
            raise TypeError("group must not be None")
        _require_some("keys", keys)

        def rule(configuration):
            g = configuration.get_group(group)
            if g is None:
                return [_missing_group(group)]
            return [
                f"Key '{key}' does not exist in group '{group}'"
                for key in keys
                if not g.key_exists(key)
            ]

        self._rules.append(rule)
        return self

    def build(self) -> ValidationContext:
        return ValidationContext(self._rules)
