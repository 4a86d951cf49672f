#!/usr/bin/env python
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

"""Read config file for emojicatalog.

This looks for a file named '.emojicatalog' in the user's home directory,
then for /usr/local/share/emojicatalog/config.  It should contain lines
consisting of a name, '=' and a value.  The expected names are
'emoji_test', the path to emoji-test.txt (optionally gzipped), and
'emoji_font', the path to the font used to decide which emoji can be
displayed.

Environment variables EMOJICATALOG_EMOJI_TEST and EMOJICATALOG_EMOJI_FONT
override the values in the file.
"""

import os
from os import path
import types

CONFIG_PATHS = [
    path.expanduser('~/.emojicatalog'), '/usr/local/share/emojicatalog/config']

_ENV_PREFIX = 'EMOJICATALOG_'

_values = {}
_config_path = None  # so we know


def read_config(configfile):
  """Return a dict of the name=value lines of configfile.  Blank lines and
  lines starting with '#' are ignored.  Raises ValueError on a line without
  '='."""
  result = {}
  with open(configfile, 'r') as f:
    for line in f:
      line = line.strip()
      if not line or line.startswith('#'):
        continue
      if '=' not in line:
        raise ValueError('bad line in %s: "%s"' % (configfile, line))
      k, v = line.split('=', 1)
      result[k.strip()] = v.strip()
  return result


def _setup(paths=None, environ=None):
  """Load the first config file found in paths, then apply environment
  overrides.  Replaces the current values."""
  global _config_path

  values = {}
  config_path = None
  for configfile in paths if paths is not None else CONFIG_PATHS:
    if path.exists(configfile):
      values = read_config(configfile)
      config_path = configfile
      break

  environ = os.environ if environ is None else environ
  for k, v in environ.items():
    if k.startswith(_ENV_PREFIX) and v:
      values[k[len(_ENV_PREFIX):].lower()] = v

  _values.clear()
  _values.update(values)
  _config_path = config_path

_setup()

values = types.MappingProxyType(_values)


def emoji_test(default=None):
  """Path to emoji-test.txt or emoji-test.txt.gz"""
  return _values.get('emoji_test', default)


def emoji_font(default=None):
  """Path to the font used for renderability checks"""
  return _values.get('emoji_font', default)


def get(key, default=None):
  return _values.get(key, default)


if __name__ == '__main__':
  keyset = set(_values.keys())
  if not keyset:
    print('no keys defined, probably no config file was found.')
  else:
    wid = max(len(k) for k in keyset)
    fmt = '%%%ds: %%s' % wid
    for k in sorted(keyset):
      print(fmt % (k, get(k)))
    print('config: %s' % _config_path)
