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

import sys
import argparse
import logging

import ezconf


description = """\n
Parses EZConf files and writes them back to stdout, compact or
pretty-printed, or prints the value addressed by a query.
"""

logger = logging.getLogger("ezconf")


def parse_options(args):
    parser = argparse.ArgumentParser(prog="ezconf", description=description)
    parser.add_argument("--version", action="version",
                        version='ezconf %s' % (ezconf.__version__))
    parser.add_argument("files", metavar="FILE", nargs="+",
                        help="EZConf file(s) to read.")
    parser.add_argument("-p", "--pretty", action="store_true",
                        help="Indent the output, one key per line.")
    parser.add_argument("-e", "--escape", action="store_true",
                        help="Escape values with backslashes instead of "
                             "writing quoted literals.")
    parser.add_argument("-q", "--query", metavar="QUERY", default=None,
                        help="Print the value addressed by QUERY "
                             "('group.subgroup#key') instead of the document.")
    parser.add_argument("--encoding", default="utf-8",
                        help="Charset of the input files. "
                             "(default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress information.")
    options = parser.parse_args(args)
    return options


def main(args=None):
    opt = parse_options(args)
    logging.basicConfig(level=logging.INFO if opt.verbose else logging.WARNING)
    for filename in opt.files:
        try:
            configuration = ezconf.load(filename, encoding=opt.encoding)
            if opt.query is None:
                ezconf.dump(configuration, sys.stdout, pretty=opt.pretty,
                            escape_values=opt.escape)
                if not opt.pretty:
                    sys.stdout.write("\n")
            else:
                value = configuration.get_value(opt.query)
                if value is not None:
                    print(value)
        except (OSError, ezconf.EzConfError) as e:
            logger.error("%s: %s", filename, e)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
