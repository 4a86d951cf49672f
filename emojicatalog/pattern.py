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

"""Compile the emoji pattern corpus into regular expressions."""

import re

# matches nothing, used when there is no emoji at all
_EMPTY_ALTERNATION = '((?!))'


def sort_corpus(corpus):
  """Return the corpus entries longest first.

  Python's re tries alternatives left to right and takes the first that
  matches, so a longer sequence has to come before any of its prefixes (a
  flag followed by a modifier before the bare flag, for example).  Entries
  of the same length are ordered by text so the pattern is deterministic."""
  return sorted(set(corpus), key=lambda s: (-len(s), s))


def alternation(corpus):
  """Return the source of a group matching any one corpus entry.

  Entries are regular expression sources: literal text must already be
  escaped (see modifiers.generalize), which takes care of the '*' and '#'
  of the keycap sequences."""
  entries = sort_corpus(corpus)
  if not entries:
    return _EMPTY_ALTERNATION
  return '(%s)' % '|'.join(entries)


def compile_patterns(corpus):
  """Return a tuple of match_one, match_multiple.

  match_one matches a single emoji, match_multiple one or more emoji back
  to back."""
  source = alternation(corpus)
  return re.compile(source), re.compile(source + '+')
