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

"""Decide whether a font can display an emoji sequence.

A single emoji needs a cmap entry.  A sequence of several emoji (a ZWJ
sequence, a flag, a keycap, a modifier sequence) is only shown as one image
if the font has a GSUB ligature for the glyphs of the sequence; otherwise it
falls apart into its pieces.  Joiners and variation selectors are ignored on
both sides, emoji fonts differ in whether they keep them in the ligature.
"""

import logging

from fontTools import ttLib

from emojicatalog import codepoints

log = logging.getLogger('emojicatalog.font_render')

# codepoints that never need a glyph of their own
_IGNORABLE = frozenset(
    [codepoints.ZWJ, codepoints.EMOJI_VS, codepoints.TEXT_VS])

_LIGATURE_SUBST = 4
_EXTENSION_SUBST = 7


def get_cmap(font):
  """Get the unicode cmap dictionary of a font, preferring format 12."""
  cmaps = {}
  for table in font['cmap'].tables:
    if (table.format, table.platformID, table.platEncID) in [
        (4, 3, 1), (12, 3, 10)]:
      cmaps[table.format] = table.cmap
  if 12 in cmaps:
    return cmaps[12]
  elif 4 in cmaps:
    return cmaps[4]
  return {}


def _ligature_subtables(font):
  if 'GSUB' not in font:
    return
  lookup_list = font['GSUB'].table.LookupList
  if not lookup_list:
    return
  for lookup in lookup_list.Lookup:
    for subtable in lookup.SubTable:
      if lookup.LookupType == _EXTENSION_SUBST:
        if subtable.ExtensionLookupType != _LIGATURE_SUBST:
          continue
        subtable = subtable.ExtSubTable
      elif lookup.LookupType != _LIGATURE_SUBST:
        continue
      yield subtable


def get_ligatures(font, ignored_glyphs=()):
  """Return the set of glyph name tuples that some GSUB ligature replaces
  by a single glyph.  Glyphs in ignored_glyphs are left out of the
  tuples."""
  ignored_glyphs = frozenset(ignored_glyphs)
  result = set()
  for subtable in _ligature_subtables(font):
    for first, ligatures in subtable.ligatures.items():
      for ligature in ligatures:
        glyphs = tuple(
            g for g in [first] + list(ligature.Component)
            if g not in ignored_glyphs)
        result.add(glyphs)
  return result


class FontRenderer(object):
  """Renderability predicate for one font.

  font is a file name or a TTFont; of a collection the first font is
  used."""

  def __init__(self, font):
    if isinstance(font, str):
      log.info('loading font %s', font)
      font = ttLib.TTFont(font, fontNumber=0)
    self.cmap = get_cmap(font)
    self.has_gsub = 'GSUB' in font
    ignored_glyphs = [self.cmap[cp] for cp in _IGNORABLE if cp in self.cmap]
    self.ligatures = get_ligatures(font, ignored_glyphs)
    log.debug('%d cmap entries, %d ligatures',
              len(self.cmap), len(self.ligatures))

  def can_render(self, text):
    glyphs = []
    for cp in (ord(c) for c in text):
      if cp in _IGNORABLE:
        continue
      glyph = self.cmap.get(cp)
      if glyph is None:
        return False
      glyphs.append(glyph)
    if not glyphs:
      return False
    if len(glyphs) == 1 or not self.has_gsub:
      return True
    return tuple(glyphs) in self.ligatures

  __call__ = can_render
