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

"""Parse emoji-test.txt into a catalog of groups, subgroups and emoji.

The data looks like this:

  # group: Smileys & Emotion

  # subgroup: face-smiling
  1F600                                  ; fully-qualified     # 😀 E1.0 grinning face
  ...
  # subgroup: hand-fingers-open
  1F44B                                  ; fully-qualified     # 👋 E0.6 waving hand
  1F44B 1F3FB                            ; fully-qualified     # 👋🏻 E1.0 waving hand: light skin tone

Each sequence line becomes an Emoji in the current subgroup, except that
emoji with a skin tone or hair style modifier whose name starts with the
name of an emoji already seen ('waving hand' above) are attached to that
emoji as variations.  Unqualified and minimally-qualified sequences are
dropped when the fully-qualified version is already known.  The modifiers
themselves ('light skin tone', 'red hair') go into the lookup but not into
any subgroup, which leaves the Component group empty so it is removed.

Parsing is single pass, so a variation listed before its base emoji ends
up as an emoji of its own in the subgroup.  emoji-test.txt always lists the
base first.
"""

import collections
import logging
import re

from emojicatalog import catalog
from emojicatalog import codepoints
from emojicatalog import modifiers

log = logging.getLogger('emojicatalog.emoji_test_parser')

GROUP_RE = re.compile(r'^# group: (.*)')
SUBGROUP_RE = re.compile(r'^# subgroup: (.*)')
# codepoints ; status # [glyph] [version] name, a glyph has no ASCII letters
SEQUENCE_RE = re.compile(
    r'^([0-9a-fA-F ]+[0-9a-fA-F]).*; *([-a-z]*) *'
    r'# (?:[^ A-Za-z]* )?(?:E[0-9.]+ )?(.*)')

NON_FULLY_QUALIFIED = frozenset(['unqualified', 'minimally-qualified'])

_VS = chr(codepoints.EMOJI_VS)
_KEYCAP = chr(codepoints.KEYCAP)

ParseResult = collections.namedtuple(
    'ParseResult', 'groups, text_lookup, name_lookup, corpus')


def always_renderable(text):
  return True


def _fully_qualified_forms(text):
  """Texts under which a fully-qualified version of text would be listed."""
  return (text + _VS, text.replace(_KEYCAP, _VS + _KEYCAP))


class _CatalogBuilder(object):
  """Accumulates the catalog while lines are parsed."""

  def __init__(self, can_render):
    self.can_render = can_render
    self.groups = []
    self.text_lookup = {}
    self.name_lookup = {}
    self.corpus = set()
    self.current_group = None
    self.current_subgroup = None

  def add_group(self, name):
    self.current_group = catalog.Group(name)
    self.groups.append(self.current_group)
    self.current_subgroup = None

  def add_subgroup(self, name, line):
    if self.current_group is None:
      raise ValueError('subgroup before any group: "%s"' % line)
    self.current_subgroup = catalog.SubGroup(name, self.current_group)
    self.current_group.subgroups.append(self.current_subgroup)

  def add_sequence(self, sequence, status, name, line):
    if self.current_subgroup is None:
      raise ValueError('sequence before any subgroup: "%s"' % line)

    try:
      text = codepoints.decode_sequence(sequence)
    except ValueError as e:
      raise ValueError('%s in line "%s"' % (e, line))

    # modifier variants other than the first are covered by the pattern
    # of the first one
    key, has_modifier, has_nonfirst_modifier = modifiers.generalize(text)
    if not has_nonfirst_modifier:
      self.corpus.add(key)

    if status in NON_FULLY_QUALIFIED:
      for form in _fully_qualified_forms(text):
        if form in self.text_lookup:
          log.debug('skip %s %s, have %s', status, name,
                    codepoints.seq_to_string(form))
          return None

    emoji = catalog.Emoji(
        name, text, self.current_subgroup,
        renderable=bool(self.can_render(text)))
    self.text_lookup[text] = emoji
    self.name_lookup[name] = emoji

    base_name = name.split(':')[0]
    parent = self.name_lookup.get(base_name) if has_modifier else None
    if parent is emoji:
      # a bare modifier ('light skin tone'), only kept in the lookup
      pass
    elif parent is not None:
      parent.variations.append(emoji)
    else:
      if has_modifier:
        log.debug('no base emoji "%s" for %s', base_name, name)
      self.current_subgroup.emoji_list.append(emoji)
    return emoji


def parse_lines(lines, can_render=None):
  """Parse emoji-test.txt lines and return a ParseResult.

  lines is any iterable of strings, it is consumed once.  can_render is
  called with the text of each emoji added to the catalog, and defaults to
  treating everything as renderable.  Groups without emoji are removed from
  the result.  Raises ValueError on malformed sequences or on sequences
  outside of a subgroup."""
  builder = _CatalogBuilder(can_render or always_renderable)
  for line in lines:
    line = line.rstrip('\r\n')

    m = GROUP_RE.match(line)
    if m:
      builder.add_group(m.group(1))
      continue

    m = SUBGROUP_RE.match(line)
    if m:
      builder.add_subgroup(m.group(1), line)
      continue

    m = SEQUENCE_RE.match(line)
    if m:
      builder.add_sequence(m.group(1), m.group(2), m.group(3), line)

  groups = catalog.prune_empty_groups(builder.groups)
  log.info('parsed %d groups, %d emoji, %d patterns',
           len(groups), len(builder.text_lookup), len(builder.corpus))
  return ParseResult(
      groups, builder.text_lookup, builder.name_lookup, builder.corpus)
