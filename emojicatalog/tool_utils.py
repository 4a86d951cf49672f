# Copyright 2020 Google Inc. All rights reserved.
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

"""Some common utilities for tools to use."""

import logging
import os
import os.path as path


def resolve_path(somepath):
  """Return the absolute, user-expanded version of somepath.  If the path is
  empty or is '-', returns None."""
  if not somepath or somepath == '-':
    return None
  return path.realpath(path.abspath(path.expanduser(somepath)))


def check_file_exists(filepath):
  if not os.path.isfile(filepath):
    raise ValueError('%s does not exist or is not a file' % filepath)


def parse_loglevel(loglevel):
  """Return the numeric level for a logging level name or value (int or
  string), or None if it is neither."""
  try:
    return int(loglevel)
  except ValueError:
    level = getattr(logging, str(loglevel).upper(), None)
    return level if isinstance(level, int) else None


def setup_logging(loglevel, quiet_ttx=True):
  """Set up logging to stream to stderr.

  The loglevel is a logging level name or a level value (int or string).

  fontTools uses 'info' to report when it is reading tables, but when we
  want 'info' in our own tools we usually don't want this detail.  When
  quiet_ttx is true, set up logging to treat 'info' logs from fontTools
  misc.xmlReader and ttLib as though they were at level 19."""

  level = parse_loglevel(loglevel)
  if level is None:
    raise ValueError(
        'Could not set log level "%s", should be one of debug, info, '
        'warning, error, critical, or a numeric value' % loglevel)
  logging.basicConfig(level=level)

  if quiet_ttx and level == logging.INFO:
    for logger_name in ['fontTools.misc.xmlReader', 'fontTools.ttLib']:
      logger = logging.getLogger(logger_name)
      logger.setLevel(level + 1)
