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

"""Skin tone and hair style modifiers.

Emoji like 'man: curly hair, dark skin tone' are listed in emoji-test.txt
once per modifier combination, but text can contain combinations the data
does not list.  generalize() turns an emoji's text into a regular
expression source in which each modifier is replaced by an alternation of
every member of its class, so that one pattern built from the first
(canonical) variant matches all of them.
"""

import re

SKIN_TONE_COMPONENTS = (
    '\U0001f3fb',  # light skin tone
    '\U0001f3fc',  # medium-light skin tone
    '\U0001f3fd',  # medium skin tone
    '\U0001f3fe',  # medium-dark skin tone
    '\U0001f3ff',  # dark skin tone
)

HAIR_STYLE_COMPONENTS = (
    '\U0001f9b0',  # red hair
    '\U0001f9b1',  # curly hair
    '\U0001f9b3',  # white hair
    '\U0001f9b2',  # bald
)

MODIFIER_CLASSES = (SKIN_TONE_COMPONENTS, HAIR_STYLE_COMPONENTS)

_MODIFIER_TO_CLASS = {
    glyph: components
    for components in MODIFIER_CLASSES for glyph in components}

_MODIFIER_RE = re.compile(
    '|'.join(re.escape(glyph) for glyph in sorted(_MODIFIER_TO_CLASS)))


def _class_pattern(components):
  return '(?:%s)' % '|'.join(re.escape(glyph) for glyph in components)

_CLASS_PATTERNS = {
    components: _class_pattern(components) for components in MODIFIER_CLASSES}


def modifier_class(glyph):
  """Return the tuple of modifiers glyph belongs to, or None."""
  return _MODIFIER_TO_CLASS.get(glyph)


def is_canonical_modifier(glyph):
  """True if glyph is the first member of its modifier class."""
  components = modifier_class(glyph)
  return components is not None and components[0] == glyph


def contains_modifier(text):
  return _MODIFIER_RE.search(text) is not None


def generalize(text):
  """Return a tuple of regex source, has_modifier, has_nonfirst_modifier.

  Literal parts of text are escaped.  Each modifier glyph is replaced by a
  non-capturing group matching any member of its class.  has_nonfirst_modifier
  is true if any modifier found is not the first member of its class; the
  pattern of such a variant duplicates the one of the canonical variant."""
  parts = []
  has_modifier = False
  has_nonfirst_modifier = False
  pos = 0
  for m in _MODIFIER_RE.finditer(text):
    glyph = m.group(0)
    components = _MODIFIER_TO_CLASS[glyph]
    has_modifier = True
    has_nonfirst_modifier |= glyph != components[0]
    parts.append(re.escape(text[pos:m.start()]))
    parts.append(_CLASS_PATTERNS[components])
    pos = m.end()
  parts.append(re.escape(text[pos:]))
  return ''.join(parts), has_modifier, has_nonfirst_modifier
