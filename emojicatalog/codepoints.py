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

"""Conversion between hex codepoint sequences and text."""

import re

ZWJ = 0x200d
EMOJI_VS = 0xfe0f
TEXT_VS = 0xfe0e
KEYCAP = 0x20e3

_MAX_CODEPOINT = 0x10ffff

_HEX_RE = re.compile(r'[0-9a-fA-F]+')


def _is_scalar_value(cp):
  return 0 <= cp <= _MAX_CODEPOINT and not 0xd800 <= cp <= 0xdfff


def decode_sequence(sequence):
  """Return the text for a string of space-separated hex codepoints, e.g.
  '1F468 200D 2764'.  Raises ValueError if a token is not hex or is not a
  unicode scalar value."""
  text = []
  for token in sequence.split():
    if not _HEX_RE.fullmatch(token):
      raise ValueError('bad codepoint "%s" in sequence "%s"' % (
          token, sequence))
    cp = int(token, 16)
    if not _is_scalar_value(cp):
      raise ValueError('codepoint %s in sequence "%s" is not a scalar value' % (
          token, sequence))
    text.append(chr(cp))
  return ''.join(text)


def seq_to_string(seq):
  """Return a space-separated hex string for text or a sequence of ints."""
  if isinstance(seq, str):
    seq = [ord(c) for c in seq]
  return ' '.join('%04X' % cp for cp in seq)
