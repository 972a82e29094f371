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

from __future__ import annotations
from typing import Optional
import logging


def is_identifier_char(c: str) -> bool:
    """Group identifiers are made of letters and decimal digits only."""
    return c.isalpha() or c.isdecimal()


def is_identifier(name: str) -> bool:
    return bool(name) and all(is_identifier_char(c) for c in name)


def strip_whitespace(text: str) -> str:
    "'t es t' -> 'test'"
    return "".join(text.split())


class LoggerMixin:
    _logger: Optional[logging.Logger] = None

    @property
    def logger(self):
        if self._logger is None:
            self._logger = logging.getLogger(
                ".".join([self.__class__.__module__, self.__class__.__name__])
            )
        return self._logger
