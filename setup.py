#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

readme = """emojicatalog parses the Unicode emoji-test.txt data into a catalog
of emoji groups, subgroups and skin tone / hair style variations, and builds
regular expressions that find emoji in text."""

setup(name='emojicatalog',
      version='0.0.1',
      description='Emoji catalog and matcher built from emoji-test.txt',
      license="Apache",
      long_description=readme,
      author='emojicatalog Authors',
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.7',
      install_requires=[
          'fontTools',
      ],
      entry_points={
          'console_scripts': [
              'emojifind = emojicatalog.emoji_find:main',
          ]
      })
