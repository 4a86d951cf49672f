#!/usr/bin/env python
#
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

"""Dump the emoji catalog built from emoji-test.txt, or find emoji in
text."""

import argparse
import sys

from emojicatalog import codepoints
from emojicatalog import emoji_data
from emojicatalog import tool_utils


def _print_stats(data, out):
  variations = sum(len(e.variations) for e in data.all_emoji())
  renderable = sum(1 for e in data.text_lookup.values() if e.renderable)
  print('%d groups, %d emoji, %d variations' % (
      len(data.groups), len(data.text_lookup) - variations, variations),
      file=out)
  print('%d of %d renderable, %d patterns' % (
      renderable, len(data.text_lookup), len(data.corpus)), file=out)


def _print_groups(data, out):
  for group in data.groups:
    print('%s %s (%d)' % (group.icon, group.name, group.emoji_count), file=out)
    for subgroup in group.subgroups:
      print('  %s (%d)' % (subgroup.name, len(subgroup.emoji_list)), file=out)


def _emoji_line(emoji, indent):
  return '%s%s %s  %s [%s]' % (
      indent, ' ' if emoji.renderable else '!', emoji.text, emoji.name,
      codepoints.seq_to_string(emoji.text))


def _print_list(data, out):
  for group in data.groups:
    print('# %s' % group.name, file=out)
    for subgroup in group.subgroups:
      print('## %s' % subgroup.name, file=out)
      for emoji in subgroup.emoji_list:
        print(_emoji_line(emoji, ''), file=out)
        for variation in emoji.variations:
          print(_emoji_line(variation, '    '), file=out)


def _print_found(data, text, out):
  runs = data.find_all(text)
  if not runs:
    print('no emoji in "%s"' % text, file=out)
    return
  for start, end, run in runs:
    print('%d-%d: %s' % (start, end, run), file=out)
    for m in data.match_one.finditer(run):
      emoji = data.lookup(m.group(0))
      name = emoji.name if emoji else '<not in catalog>'
      print('  %s [%s] %s' % (
          m.group(0), codepoints.seq_to_string(m.group(0)), name), file=out)


def main(argv=None, out=sys.stdout):
  parser = argparse.ArgumentParser(description=__doc__)
  parser.add_argument(
      '-d', '--data',
      help='emoji-test.txt or emoji-test.txt.gz, or a directory holding one, '
      'default from config', metavar='path')
  parser.add_argument(
      '-f', '--font',
      help='font to check renderability with, default from config',
      metavar='font')
  parser.add_argument(
      '--groups', help='list groups and subgroups', action='store_true')
  parser.add_argument(
      '--list', help='list all emoji, ! marks those the font cannot render',
      action='store_true')
  parser.add_argument(
      '--stats', help='print catalog counts', action='store_true')
  parser.add_argument(
      '-l', '--loglevel',
      help='log level name or value, default warning',
      metavar='level',
      default='warning')
  parser.add_argument(
      'text', help='text to find emoji in', metavar='text', nargs='*')
  args = parser.parse_args(argv)

  tool_utils.setup_logging(args.loglevel)

  if not (args.groups or args.list or args.stats or args.text):
    args.stats = True

  data = emoji_data.load(args.data, font=tool_utils.resolve_path(args.font))

  if args.stats:
    _print_stats(data, out)
  if args.groups:
    _print_groups(data, out)
  if args.list:
    _print_list(data, out)
  for text in args.text:
    _print_found(data, text, out)


if __name__ == '__main__':
  main()
