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

"""Group, subgroup and emoji objects of the emoji catalog.

Groups own their subgroups and subgroups own their emoji.  The links back
up the tree (emoji to subgroup, subgroup to group) are weak references, so
they resolve to None once the owner has been discarded, for example when an
empty group is pruned from the catalog.
"""

import weakref


def _deref(ref):
  return ref() if ref is not None else None


class Emoji(object):
  """An emoji sequence with its name.  variations holds the skin tone and
  hair style variants of this emoji; an emoji with variations is a base
  emoji."""

  def __init__(self, name, text, subgroup, renderable=True):
    self.name = name
    self.text = text
    self.renderable = renderable
    self._subgroup = weakref.ref(subgroup) if subgroup is not None else None
    self.variations = []

  @property
  def subgroup(self):
    return _deref(self._subgroup)

  @property
  def group(self):
    subgroup = self.subgroup
    return subgroup.group if subgroup is not None else None

  def __repr__(self):
    return 'Emoji(%r, %r)' % (self.name, self.text)


class SubGroup(object):

  def __init__(self, name, group):
    self.name = name
    self._group = weakref.ref(group) if group is not None else None
    self.emoji_list = []

  @property
  def group(self):
    return _deref(self._group)

  def __repr__(self):
    return 'SubGroup(%r, %d emoji)' % (self.name, len(self.emoji_list))


class Group(object):

  def __init__(self, name):
    self.name = name
    self.subgroups = []

  @property
  def icon(self):
    """Text of the first emoji of the first subgroup.  Raises IndexError if
    there is none, so only use this on a pruned catalog."""
    return self.subgroups[0].emoji_list[0].text

  @property
  def emoji_count(self):
    return sum(len(subgroup.emoji_list) for subgroup in self.subgroups)

  @property
  def emoji_list(self):
    """Iterate over the base emoji of all subgroups, in order."""
    for subgroup in self.subgroups:
      for emoji in subgroup.emoji_list:
        yield emoji

  def __repr__(self):
    return 'Group(%r, %d subgroups)' % (self.name, len(self.subgroups))


def prune_empty_groups(groups):
  """Return the groups that have at least one emoji, keeping their order."""
  return [group for group in groups if group.emoji_count]
