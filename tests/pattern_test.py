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

"""Tests for pattern.py."""

import re
import unittest

from emojicatalog import pattern


class SortCorpusTest(unittest.TestCase):
    def test_longest_first(self):
        self.assertEqual(['abc', 'ab', 'b', 'c'],
                         pattern.sort_corpus(['c', 'ab', 'abc', 'b', 'ab']))


class CompilePatternsTest(unittest.TestCase):
    def test_longest_match_first(self):
        match_one, _ = pattern.compile_patterns(['A', 'AB'])
        self.assertEqual('AB', match_one.match('AB').group(0))
        match_one, _ = pattern.compile_patterns(['AB', 'A'])
        self.assertEqual('AB', match_one.match('AB').group(0))

    def test_match_multiple(self):
        _, match_multiple = pattern.compile_patterns(['X', 'Y'])
        self.assertTrue(match_multiple.fullmatch('XYXX'))
        self.assertFalse(match_multiple.fullmatch('X Y'))
        self.assertEqual('X', match_multiple.search('X Y').group(0))
        self.assertFalse(match_multiple.fullmatch(''))

    def test_match_one_is_single(self):
        match_one, _ = pattern.compile_patterns(['X', 'Y'])
        self.assertFalse(match_one.fullmatch('XY'))
        self.assertTrue(match_one.fullmatch('Y'))

    def test_escaped_asterisk(self):
        match_one, _ = pattern.compile_patterns([re.escape('*\u20e3')])
        self.assertTrue(match_one.fullmatch('*\u20e3'))
        self.assertFalse(match_one.fullmatch('\u20e3'))

    def test_empty_corpus(self):
        match_one, match_multiple = pattern.compile_patterns([])
        self.assertIsNone(match_one.search('anything'))
        self.assertIsNone(match_multiple.search('anything'))


if __name__ == '__main__':
    unittest.main()
