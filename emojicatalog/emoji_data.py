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

"""Emoji catalog, lookup and matching patterns built from emoji-test.txt.

Nothing is loaded at import time.  Call load() once (and again to reload
with another data file or font), then get() returns the current EmojiData.
An EmojiData is never modified after it is built, so it can be shared
between threads; load() builds a complete new one before replacing the
current one, and leaves the current one in place if the build fails.

  from emojicatalog import emoji_data
  emoji_data.load('/path/to/emoji-test.txt.gz', font='NotoColorEmoji.ttf')
  data = emoji_data.get()
  for group in data.groups:
    print(group.icon, group.name, group.emoji_count)
  data.split_text('hello 👋🏽 there')
"""

import logging
from os import path
import threading
import types

from emojicatalog import emoji_test_parser
from emojicatalog import emojiconfig
from emojicatalog import font_render
from emojicatalog import pattern
from emojicatalog import sources
from emojicatalog import tool_utils

log = logging.getLogger('emojicatalog.emoji_data')


class EmojiData(object):
  """A complete, read-only emoji catalog.

  groups is a tuple of Group, text_lookup and name_lookup are read-only
  mappings to Emoji, match_one and match_multiple are compiled patterns
  matching one emoji and a run of emoji."""

  def __init__(self, groups, text_lookup, name_lookup, corpus):
    self.groups = tuple(groups)
    self.text_lookup = types.MappingProxyType(dict(text_lookup))
    self.name_lookup = types.MappingProxyType(dict(name_lookup))
    self.corpus = tuple(pattern.sort_corpus(corpus))
    self.match_one, self.match_multiple = pattern.compile_patterns(
        self.corpus)

  def all_emoji(self):
    """Iterate over the base emoji of all groups, in catalog order."""
    for group in self.groups:
      for emoji in group.emoji_list:
        yield emoji

  def lookup(self, text):
    return self.text_lookup.get(text)

  def find_all(self, text):
    """Return a list of start, end, run tuples, one for each run of
    consecutive emoji in text."""
    return [(m.start(), m.end(), m.group(0))
            for m in self.match_multiple.finditer(text)]

  def split_text(self, text):
    """Split text into a list of is_emoji, chunk tuples that cover it, each
    emoji chunk being a run of consecutive emoji."""
    result = []
    pos = 0
    for start, end, run in self.find_all(text):
      if start > pos:
        result.append((False, text[pos:start]))
      result.append((True, run))
      pos = end
    if pos < len(text):
      result.append((False, text[pos:]))
    return result


def build(lines, can_render=None):
  """Parse the emoji-test.txt lines and return a new EmojiData.  can_render
  is the renderability predicate, by default everything is renderable.
  Raises ValueError if the data is malformed."""
  result = emoji_test_parser.parse_lines(lines, can_render)
  return EmojiData(*result)


_lock = threading.Lock()
_current = None


def publish(data):
  """Make data the EmojiData returned by get()."""
  global _current
  with _lock:
    _current = data


def get():
  """Return the current EmojiData.  Raises RuntimeError if nothing was
  loaded yet."""
  data = _current
  if data is None:
    raise RuntimeError('no emoji data loaded, call emoji_data.load()')
  return data


def load(data_path=None, font=None, supplements=None):
  """Build an EmojiData from an emoji-test.txt file and publish it.

  data_path is the file, or a directory holding emoji-test.txt or
  emoji-test.txt.gz, and defaults to the 'emoji_test' config value.  font (a
  path or a TTFont) defaults to the 'emoji_font' config value; without a
  font every emoji is considered renderable.  Returns the new EmojiData.
  On failure the exception propagates and the previously loaded data stays
  current."""
  data_path = tool_utils.resolve_path(data_path or emojiconfig.emoji_test())
  if not data_path:
    raise ValueError('no emoji-test.txt given and none configured')
  if path.isdir(data_path):
    dirname = data_path
    data_path, _ = sources.find_emoji_test_file([dirname])
    if data_path is None:
      raise ValueError('no %s in %s' % (sources.EMOJI_TEST_BASENAME, dirname))
  tool_utils.check_file_exists(data_path)

  if font is None:
    font = tool_utils.resolve_path(emojiconfig.emoji_font())
  can_render = font_render.FontRenderer(font) if font is not None else None

  try:
    data = build(
        sources.emoji_test_lines(data_path, supplements), can_render)
  except ValueError:
    log.error('failed to build emoji data from %s', data_path)
    raise
  publish(data)
  return data
