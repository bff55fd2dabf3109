"""
A Python library for finding, describing and editing numbered sequences of
names, such as image sequences or versioned files.

The MIT License (MIT)

Copyright (c) 2024 The seqo authors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.

**Collections**

A :class:`~seqo.collection.Collection` is a set of indexes sharing a head,
a tail and a padding width.

.. doctest::

    >>> c = Collection('file_', '.txt', 2, [1, 2, 4, 5, 7])
    >>> c.members[:2]
    ['file_01.txt', 'file_02.txt']
    >>> c.format()
    'file_%02d.txt [1-2, 4-5, 7]'
    >>> c.holes.indexes
    [3, 6]
    >>> [str(piece) for piece in c.separate()]
    ['file_%02d.txt [1-2]', 'file_%02d.txt [4-5]', 'file_%02d.txt [7]']

Edit a Collection in place

.. doctest::

    >>> c.add(['file_03.txt', 6]).isContiguous
    True
    >>> c.remove('file_07.txt')
    <Collection: 'file_%02d.txt [1-6]'>

**Assembling Collections**

Group a list of names into collections and the remainder

.. doctest::

    >>> collections, remainder = assemble(
    ...     ['shot_001.exr', 'shot_002.exr', 'shot_003.exr', 'notes.txt'])
    >>> collections
    [<Collection: 'shot_%03d.exr [1-3]'>]
    >>> remainder
    ['notes.txt']

Only consider frame numbers between dots

.. code-block:: python

    assemble(names, patterns=[PATTERNS['frames']])

**Parsing Collections**

.. doctest::

    >>> parseCollection('file_%02d.txt [1-3, 5]').members
    ['file_01.txt', 'file_02.txt', 'file_03.txt', 'file_05.txt']
    >>> parseCollection('v%03d [1-10] [2-9]',
    ...                 pattern='{head}{padding}{tail} [{range}] [{holes}]').indexes
    [1, 10]
"""
import logging

from seqo.__version__ import __version__
from seqo.constants import DEFAULT_FORMAT, DIGITS_PATTERN, PATTERNS
from seqo.exceptions import (
    SeqoException, ValidationError, InvalidIndex, PatternMismatch, InvalidItemType,
    IncompatibleCollection, MaxSizeException, ParseException, InvalidRangeFormat,
    InvalidNumber, ArgumentTypeError, ZeroStepError, IncompatibleStepError)
from seqo.utils import seqrange
from seqo.collection import Collection
from seqo.assembly import assemble
from seqo.parsing import parseCollection, parseRangeList

logging.getLogger(__name__).addHandler(logging.NullHandler())
