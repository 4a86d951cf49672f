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

"""Read the lines of emoji-test.txt, plain or gzipped.

Some platforms ship emoji that Unicode does not define.  A supplement is a
tuple of an anchor and a list of extra lines in emoji-test.txt format; the
extra lines are inserted right after the line that starts with the anchor,
so they land in the same subgroup.
"""

import gzip
import logging
from os import path

log = logging.getLogger('emojicatalog.sources')

EMOJI_TEST_BASENAME = 'emoji-test.txt'

# Extra Microsoft emoji, after 1F63E pouting cat
_MICROSOFT_CATS = (
    '1F63E  ',
    [
        '1F431 200D 1F3CD ; fully-qualified # \U0001f431\u200d\U0001f3cd stunt cat',
        '1F431 200D 1F453 ; fully-qualified # \U0001f431\u200d\U0001f453 hipster cat',
        '1F431 200D 1F680 ; fully-qualified # \U0001f431\u200d\U0001f680 astro cat',
        '1F431 200D 1F464 ; fully-qualified # \U0001f431\u200d\U0001f464 ninja cat',
        '1F431 200D 1F409 ; fully-qualified # \U0001f431\u200d\U0001f409 dino cat',
        '1F431 200D 1F4BB ; fully-qualified # \U0001f431\u200d\U0001f4bb hacker cat',
    ])

DEFAULT_SUPPLEMENTS = [_MICROSOFT_CATS]


def find_emoji_test_file(dirnames, basename=EMOJI_TEST_BASENAME):
  """Return a tuple of path, open function for the first of basename or
  basename + '.gz' found in dirnames, or (None, None)."""
  for dirname in dirnames:
    for name in (basename, basename + '.gz'):
      filepath = path.join(dirname, name)
      if path.isfile(filepath):
        return filepath, _open_function(filepath)
  return None, None


def _open_function(filepath):
  if filepath.endswith('.gz'):
    return lambda p: gzip.open(p, 'rt', encoding='utf-8')
  return lambda p: open(p, 'r', encoding='utf-8')


def inject_lines(lines, supplements, strict=False):
  """Yield lines, adding the lines of each supplement after any line
  starting with its anchor.  With strict, raise ValueError at the end if an
  anchor was never seen."""
  seen = set()
  for line in lines:
    yield line
    for anchor, extra_lines in supplements:
      if line.startswith(anchor):
        seen.add(anchor)
        for extra in extra_lines:
          yield extra

  unused = [anchor for anchor, _ in supplements if anchor not in seen]
  if unused:
    if strict:
      raise ValueError('%d unused supplement%s: %s' % (
          len(unused), '' if len(unused) == 1 else 's',
          ', '.join(repr(a) for a in unused)))
    log.debug('unused supplements: %s', ', '.join(repr(a) for a in unused))


def read_lines(filepath):
  """Yield the lines of filepath without line terminators.  The file is
  read with gzip if its name ends in '.gz'."""
  with _open_function(filepath)(filepath) as f:
    for line in f:
      yield line.rstrip('\r\n')


def emoji_test_lines(filepath, supplements=None, strict=False):
  """Yield the lines of an emoji-test.txt file, with supplements (by
  default DEFAULT_SUPPLEMENTS) inserted."""
  if supplements is None:
    supplements = DEFAULT_SUPPLEMENTS
  log.info('reading %s', filepath)
  return inject_lines(read_lines(filepath), supplements, strict=strict)
