#!/usr/bin/python
# -*- coding: utf-8 -*-

#
# Copyright 2016 Georg Seifert. All Rights Reserved.
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

from io import StringIO
import logging
import sys

from ezconf.classes import Configuration, ConfigurationGroup
from ezconf.types import (
    BEGIN_GROUP,
    END_GROUP,
    INDENT,
    KV_SEPARATOR,
    VALUE_END,
    escape_key,
    escape_value,
    quote_literal,
)

__all__ = ["Writer", "dump", "dumps"]

logger = logging.getLogger(__name__)

"""
    Usage

    writer = Writer(fp, pretty=True)
    writer.write(configuration)

"""


class Writer:
    """Serialize a Configuration to EZConf text.

    Args:
        fp: a writable text file object, stdout if None.
        pretty: indent groups and put every key on its own line instead of
            writing everything without any whitespace.
        escape_values: escape the special characters of values with a
            backslash instead of writing them as quoted literals.
    """

    def __init__(self, fp=None, pretty=False, escape_values=False):
        if fp is None:
            fp = sys.stdout
        self.file = fp
        self.pretty = pretty
        self.escape_values = escape_values

    def write(self, configuration: Configuration) -> None:
        logger.info("Writing EZConf document")
        if self.pretty:
            for index, group in enumerate(configuration.root_groups):
                self.writePrettyGroup(group, 0, separate=index > 0)
        else:
            for group in configuration.root_groups:
                self.writeGroup(group)

    def writeGroup(self, group: ConfigurationGroup) -> None:
        self.file.write(escape_key(group.identifier) + BEGIN_GROUP)
        for key, value in group:
            self.writeKey(key)
            self.file.write(KV_SEPARATOR)
            self.writeValue(value)
            self.file.write(VALUE_END)
        for child in group.children:
            self.writeGroup(child)
        self.file.write(END_GROUP)

    def writePrettyGroup(
        self, group: ConfigurationGroup, depth: int, separate: bool = True
    ) -> None:
        indent = INDENT * depth
        inner_indent = INDENT * (depth + 1)
        if separate:
            self.file.write("\n")
        self.file.write(f"{indent}{escape_key(group.identifier)} {BEGIN_GROUP}")
        if not len(group) and not group.children:
            self.file.write(END_GROUP + "\n")
            return
        if len(group):
            self.file.write("\n")
        for key, value in group:
            key = escape_key(key)
            if "\n" in value:
                # continuation lines start below the first character of the value
                continuation = " " * (len(inner_indent) + len(key) + 2)
                value = value.replace("\r\n", "\n").replace("\n", "\n" + continuation)
            self.file.write(f"{inner_indent}{key}{KV_SEPARATOR} ")
            self.writeValue(value)
            self.file.write(VALUE_END + "\n")
        for child in group.children:
            self.writePrettyGroup(child, depth + 1)
        self.file.write(indent + END_GROUP + "\n")

    def writeKey(self, key: str) -> None:
        self.file.write(escape_key(key))

    def writeValue(self, value: str) -> None:
        if self.escape_values:
            self.file.write(escape_value(value))
        else:
            self.file.write(quote_literal(value))


def dump(configuration: Configuration, fp, pretty=False, escape_values=False):
    """Write a Configuration to a (writable) file object or to a file name,
    in which case the file is written as UTF-8.
    """
    if hasattr(fp, "write"):
        Writer(fp, pretty=pretty, escape_values=escape_values).write(configuration)
    else:
        with open(fp, "w", encoding="utf-8") as ofile:
            Writer(ofile, pretty=pretty, escape_values=escape_values).write(
                configuration
            )


def dumps(configuration: Configuration, pretty=False, escape_values=False) -> str:
    """Return the EZConf text of a Configuration as a str."""
    fp = StringIO()
    dump(configuration, fp, pretty=pretty, escape_values=escape_values)
    return fp.getvalue()
