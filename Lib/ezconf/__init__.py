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

from ezconf.classes import Configuration, ConfigurationGroup
from ezconf.errors import (
    BuilderStateError,
    EzConfError,
    GroupNotFoundError,
    InvariantError,
    ParseError,
)
from ezconf.parser import Parser, load, loads
from ezconf.writer import Writer, dump, dumps
from ezconf.builder import ConfigurationBuilder
from ezconf.validator import ConfigurationValidator

__version__ = "1.0.0"

__all__ = [
    "Configuration",
    "ConfigurationGroup",
    "ConfigurationBuilder",
    "ConfigurationValidator",
    "Parser",
    "Writer",
    "load",
    "loads",
    "dump",
    "dumps",
    "EzConfError",
    "ParseError",
    "InvariantError",
    "GroupNotFoundError",
    "BuilderStateError",
]
