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

"""Tests for modifiers.py."""

import re
import unittest

from emojicatalog import modifiers

WAVE = '\U0001f44b'
MAN = '\U0001f468'
ZWJ = '\u200d'
LIGHT, MEDIUM, DARK = '\U0001f3fb', '\U0001f3fd', '\U0001f3ff'
RED_HAIR, CURLY_HAIR = '\U0001f9b0', '\U0001f9b1'


class ContainsModifierTest(unittest.TestCase):
    def test_contains(self):
        self.assertTrue(modifiers.contains_modifier(WAVE + DARK))
        self.assertTrue(modifiers.contains_modifier(MAN + ZWJ + CURLY_HAIR))
        self.assertFalse(modifiers.contains_modifier(WAVE))
        self.assertFalse(modifiers.contains_modifier(''))

    def test_classes(self):
        self.assertEqual(5, len(modifiers.SKIN_TONE_COMPONENTS))
        self.assertEqual(4, len(modifiers.HAIR_STYLE_COMPONENTS))
        self.assertIs(modifiers.SKIN_TONE_COMPONENTS,
                      modifiers.modifier_class(MEDIUM))
        self.assertIs(modifiers.HAIR_STYLE_COMPONENTS,
                      modifiers.modifier_class(RED_HAIR))
        self.assertIsNone(modifiers.modifier_class(WAVE))
        self.assertTrue(modifiers.is_canonical_modifier(LIGHT))
        self.assertTrue(modifiers.is_canonical_modifier(RED_HAIR))
        self.assertFalse(modifiers.is_canonical_modifier(DARK))
        self.assertFalse(modifiers.is_canonical_modifier(WAVE))


class GeneralizeTest(unittest.TestCase):
    def test_no_modifier(self):
        key, has_modifier, has_nonfirst = modifiers.generalize(WAVE)
        self.assertEqual(re.escape(WAVE), key)
        self.assertFalse(has_modifier)
        self.assertFalse(has_nonfirst)

    def test_first_skin_tone(self):
        key, has_modifier, has_nonfirst = modifiers.generalize(WAVE + LIGHT)
        self.assertTrue(has_modifier)
        self.assertFalse(has_nonfirst)
        for tone in modifiers.SKIN_TONE_COMPONENTS:
            self.assertTrue(re.fullmatch(key, WAVE + tone))
        self.assertFalse(re.fullmatch(key, WAVE))

    def test_nonfirst_skin_tone(self):
        _, has_modifier, has_nonfirst = modifiers.generalize(WAVE + MEDIUM)
        self.assertTrue(has_modifier)
        self.assertTrue(has_nonfirst)

    def test_hair_and_skin(self):
        text = MAN + LIGHT + ZWJ + RED_HAIR
        key, has_modifier, has_nonfirst = modifiers.generalize(text)
        self.assertTrue(has_modifier)
        self.assertFalse(has_nonfirst)
        self.assertTrue(re.fullmatch(key, MAN + DARK + ZWJ + CURLY_HAIR))
        _, _, has_nonfirst = modifiers.generalize(MAN + LIGHT + ZWJ + CURLY_HAIR)
        self.assertTrue(has_nonfirst)

    def test_escapes_literal_text(self):
        key, _, _ = modifiers.generalize('*\ufe0f\u20e3')
        self.assertTrue(re.fullmatch(key, '*\ufe0f\u20e3'))
        self.assertFalse(re.fullmatch(key, '\ufe0f\u20e3'))


if __name__ == '__main__':
    unittest.main()
