#!/usr/bin/env python

import os
import re
import sys
import unittest

TEST_DIR = os.path.abspath(os.path.dirname(__file__))
SRC_DIR = os.path.join(TEST_DIR, "../src")
sys.path.insert(0, SRC_DIR)

import seqo
from seqo import Collection, assemble, parseCollection, parseRangeList
from seqo import constants, exceptions


def _formatted(collections):
    return [c.format() for c in collections]


def _word(number):
    """Spell a number with letters only, ie 0 -> a, 26 -> ba."""
    letters = []
    while True:
        number, digit = divmod(number, 26)
        letters.append(chr(ord("a") + digit))
        if not number:
            return "".join(reversed(letters))


class TestAssemble(unittest.TestCase):

    def testAssembleSimple(self):
        collections, remainder = assemble(["shot_001.exr", "shot_002.exr", "other.txt"])
        self.assertEqual(len(collections), 1)
        self.assertEqual(collections[0].indexes, [1, 2])
        self.assertEqual(collections[0].head, 'shot_')
        self.assertEqual(collections[0].tail, '.exr')
        self.assertEqual(collections[0].padding, 3)
        self.assertEqual(remainder, ["other.txt"])

    def testAssembleEmpty(self):
        self.assertEqual(assemble([]), ([], []))

    def testAssembleNoPatterns(self):
        names = ['b_1.exr', 'a_1.exr', 'a_2.exr']
        self.assertEqual(assemble(names, patterns=[]), ([], names))

    def testAssembleMinItems(self):
        names = ['a1', 'a2', 'b1']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections), ['a%d [1-2]'])
        self.assertEqual(remainder, ['b1'])

        collections, remainder = assemble(names, min_items=1)
        self.assertEqual(_formatted(collections), ['a%d [1-2]', 'b%d [1]'])
        self.assertEqual(remainder, [])

        collections, remainder = assemble(names, min_items=3)
        self.assertEqual(collections, [])
        self.assertEqual(remainder, ['a1', 'a2', 'b1'])

    def testAssembleDefaultMinItems(self):
        _minItems = constants.DEFAULT_MIN_ITEMS
        try:
            constants.DEFAULT_MIN_ITEMS = 1
            collections, remainder = assemble(['b1'])
            self.assertEqual(_formatted(collections), ['b%d [1]'])
            self.assertEqual(remainder, [])
        finally:
            constants.DEFAULT_MIN_ITEMS = _minItems

    def testAssembleMixedPadding(self):
        names = ['f_01.exr', 'f_02.exr', 'f_1.exr', 'f_2.exr', 'f_3.exr']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections), ['f_%02d.exr [1-2]', 'f_%d.exr [1-3]'])
        self.assertEqual(remainder, [])

    def testAssemblePaddingBoundary(self):
        names = ['f_0998.exr', 'f_0999.exr', 'f_1000.exr', 'f_1001.exr']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections), ['f_%04d.exr [998-1001]'])
        self.assertEqual(collections[0].members, names)
        self.assertEqual(remainder, [])

    def testAssemblePaddingBoundaryPartial(self):
        names = ['f_0998.exr', 'f_0999.exr', 'f_1000.exr', 'f_10000.exr', 'f_10001.exr']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections),
                         ['f_%04d.exr [998-1000]', 'f_%d.exr [10000-10001]'])
        self.assertEqual(remainder, [])

    def testAssemblePaddingBoundaryFiltered(self):
        names = ['f_0999.exr', 'f_1000.exr', 'f_12.exr']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections), ['f_%04d.exr [999-1000]'])
        self.assertEqual(remainder, ['f_12.exr'])

    def testAssembleMultipleNumerals(self):
        names = ['file_v1_001.exr', 'file_v1_002.exr', 'file_v1_003.exr']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections), ['file_v1_%03d.exr [1-3]'])
        self.assertEqual(remainder, [])

    def testAssembleBothNumeralsVary(self):
        names = ['a1_b1', 'a1_b2', 'a2_b1']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections), ['a%d_b1 [1-2]', 'a1_b%d [1-2]'])
        self.assertEqual(remainder, [])

    def testAssembleFramesPattern(self):
        names = ['shot_v1.0001.exr', 'shot_v1.0002.exr', 'shot_v2.0001.exr']
        collections, remainder = assemble(names, patterns=[seqo.PATTERNS['frames']])
        self.assertEqual(_formatted(collections), ['shot_v1.%04d.exr [1-2]'])
        self.assertEqual(remainder, ['shot_v2.0001.exr'])

    def testAssembleVersionsPattern(self):
        names = ['shot_v001.0001.exr', 'shot_v002.0001.exr', 'shot_v003.0001.exr']
        collections, remainder = assemble(names, patterns=[Collection.PATTERNS['versions']])
        self.assertEqual(_formatted(collections), ['shot_v%03d.0001.exr [1-3]'])
        self.assertEqual(remainder, [])

    def testAssembleCaseSensitive(self):
        names = ['Shot_1.exr', 'shot_2.EXR', 'SHOT_3.exr']
        collections, remainder = assemble(names)
        self.assertEqual(collections, [])
        self.assertEqual(remainder, ['SHOT_3.exr', 'Shot_1.exr', 'shot_2.EXR'])

    def testAssembleCaseInsensitive(self):
        names = ['Shot_1.exr', 'shot_2.EXR', 'SHOT_3.exr']
        collections, remainder = assemble(names, case_sensitive=False)
        self.assertEqual(_formatted(collections), ['Shot_%d.exr [1-3]'])
        self.assertEqual(remainder, [])

    def testAssembleCompiledPattern(self):
        pattern = re.compile(r'v(?P<index>\d+)')
        collections, remainder = assemble(['V01', 'v02', 'x'], patterns=[pattern])
        self.assertEqual(collections, [])
        self.assertEqual(remainder, ['V01', 'v02', 'x'])

        collections, remainder = assemble(['V01', 'v02', 'x'], patterns=[pattern],
                                          case_sensitive=False)
        self.assertEqual(_formatted(collections), ['V%02d [1-2]'])
        self.assertEqual(remainder, ['x'])

    def testAssembleMissingIndexGroup(self):
        self.assertRaises(exceptions.SeqoException, assemble, ['a1'], patterns=[r'\d+'])
        self.assertRaises(exceptions.SeqoException, assemble, ['a1'],
                          patterns=[re.compile(r'(?P<padding>0*)\d+')])

    def testAssembleAssumePadded(self):
        names = ['v100', 'v101', 'v102']
        collections, _ = assemble(names)
        self.assertEqual(_formatted(collections), ['v%d [100-102]'])

        collections, _ = assemble(names, assume_padded_when_ambiguous=True)
        self.assertEqual(_formatted(collections), ['v%03d [100-102]'])
        self.assertEqual(collections[0].members, names)

        collections, _ = assemble(['v9', 'v10'], assume_padded_when_ambiguous=True)
        self.assertEqual(_formatted(collections), ['v%d [9-10]'])

    def testAssembleAssumePaddedSingleDigit(self):
        # a single digit width is never read as padding
        collections, _ = assemble(['v1', 'v2', 'v3'], assume_padded_when_ambiguous=True)
        self.assertEqual(_formatted(collections), ['v%d [1-3]'])

        collections, _ = assemble(['v10', 'v11'], assume_padded_when_ambiguous=True)
        self.assertEqual(_formatted(collections), ['v%02d [10-11]'])

    def testAssembleNonAsciiDigits(self):
        names = ['s_١.exr', 's_٢.exr']
        collections, remainder = assemble(names)
        self.assertEqual(collections, [])
        self.assertEqual(remainder, names)

        names = ['s_١.exr', 's_٢.exr', 's_1.exr', 's_2.exr']
        collections, remainder = assemble(names)
        self.assertEqual(_formatted(collections), ['s_%d.exr [1-2]'])
        self.assertEqual(remainder, ['s_١.exr', 's_٢.exr'])

        # custom patterns may use \d, but only ASCII numerals are grouped
        collections, remainder = assemble(names, patterns=[r'_(?P<index>\d+)'])
        self.assertEqual(_formatted(collections), ['s_%d.exr [1-2]'])
        self.assertEqual(remainder, ['s_١.exr', 's_٢.exr'])

    def testAssembleManyTemplates(self):
        count = 2000
        words = [_word(i) for i in range(count)]
        names = []
        for word in words:
            names.extend(['k%s_1' % word, 'k%s_2' % word, 's%s_5' % word])
        collections, remainder = assemble(names)
        self.assertEqual(len(collections), count)
        self.assertEqual(collections[0].format(), 'ka_%d [1-2]')
        self.assertEqual(collections[-1].format(), 'k%s_%%d [1-2]' % words[-1])
        self.assertEqual(sorted(remainder), sorted('s%s_5' % word for word in words))

    def testAssembleRemainderOrder(self):
        names = ['b', '10', 'a', '9']
        collections, remainder = assemble(names, patterns=[seqo.PATTERNS['frames']])
        self.assertEqual(collections, [])
        self.assertEqual(remainder, ['9', '10', 'a', 'b'])

    def testAssembleRemainderUnique(self):
        collections, remainder = assemble(['a1', 'a1', 'x'])
        self.assertEqual(collections, [])
        self.assertEqual(remainder, ['a1', 'x'])

    def testAssembleInputTypes(self):
        collections, remainder = assemble(name for name in [b'f_1.txt', b'f_2.txt', b'notes'])
        self.assertEqual(_formatted(collections), ['f_%d.txt [1-2]'])
        self.assertEqual(remainder, ['notes'])

    def testAssembleOrder(self):
        names = ['b_1', 'a_1', 'b_2', 'a_2']
        collections, _ = assemble(names)
        self.assertEqual(_formatted(collections), ['b_%d [1-2]', 'a_%d [1-2]'])

    def testAssembleFormatParse(self):
        names = ['shot_0001.exr', 'shot_0002.exr', 'shot_0004.exr', 'shot_0010.exr']
        collections, _ = assemble(names)
        self.assertEqual(len(collections), 1)
        parsed = parseCollection(collections[0].format())
        self.assertEqual(parsed, collections[0])
        self.assertEqual(parsed.members, names)


class TestParse(unittest.TestCase):

    def testParseDefault(self):
        c = parseCollection('file_%02d.txt [1-2, 4-5, 7]')
        self.assertEqual(c.head, 'file_')
        self.assertEqual(c.tail, '.txt')
        self.assertEqual(c.padding, 2)
        self.assertEqual(c.indexes, [1, 2, 4, 5, 7])

    def testParseHoles(self):
        c = parseCollection("file_%02d.txt [1-10] [4-6]",
                            pattern="{head}{padding}{tail} [{ranges}] [{holes}]")
        self.assertEqual(c.indexes, [1, 2, 3, 7, 8, 9, 10])

    def testParseHolesBeforeRanges(self):
        c = parseCollection('f_%d.exr [2] [1-3]', pattern='{head}{padding}{tail} [{holes}] [{ranges}]')
        self.assertEqual(c.indexes, [1, 3])

    def testParseEmpty(self):
        c = parseCollection('%d []')
        self.assertEqual((c.head, c.tail, c.padding, c.indexes), ('', '', 0, []))

        c = parseCollection('f_%d.exr [1-3] []', pattern='{head}{padding}{tail} [{ranges}] [{holes}]')
        self.assertEqual(c.indexes, [1, 2, 3])

    def testParseRange(self):
        pattern = '{head}{padding}{tail} [{range}]'
        self.assertEqual(parseCollection('v%03d [1-5]', pattern).indexes, [1, 2, 3, 4, 5])
        self.assertEqual(parseCollection('v%03d [7]', pattern).indexes, [7])
        self.assertEqual(parseCollection('v%03d []', pattern).indexes, [])
        self.assertRaises(exceptions.PatternMismatch, parseCollection, 'v%03d [1, 3]', pattern)

        c = parseCollection('v%03d [1-10] [2-9]', pattern='{head}{padding}{tail} [{range}] [{holes}]')
        self.assertEqual(c.indexes, [1, 10])

    def testParseCaseInsensitivePlaceholders(self):
        c = parseCollection('f_%02d.exr [1-3]', pattern='{HEAD}{Padding}{TAIL} [{Ranges}]')
        self.assertEqual(c.format(), 'f_%02d.exr [1-3]')

    def testParseUnknownPlaceholder(self):
        c = parseCollection('a%d.b {foo} [1]', pattern='{head}{padding}{tail} {foo} [{ranges}]')
        self.assertEqual((c.head, c.tail, c.indexes), ('a', '.b', [1]))
        self.assertRaises(exceptions.PatternMismatch, parseCollection, 'a%d.b bar [1]',
                          '{head}{padding}{tail} {foo} [{ranges}]')

    def testParseRepeatedPlaceholder(self):
        pattern = '{head}{padding}/{head}{padding}{tail}'
        c = parseCollection('shot_%04d/shot_%04d.exr', pattern)
        self.assertEqual((c.head, c.padding, c.tail), ('shot_', 4, '.exr'))
        self.assertRaises(exceptions.PatternMismatch, parseCollection,
                          'shot_%04d/other_%04d.exr', pattern)
        self.assertRaises(exceptions.PatternMismatch, parseCollection,
                          'shot_%04d/shot_%03d.exr', pattern)

    def testParseLiteralText(self):
        c = parseCollection('(a).%d.[b] (1-2)', pattern='{head}{padding}{tail} ({ranges})')
        self.assertEqual((c.head, c.tail, c.indexes), ('(a).', '.[b]', [1, 2]))

    def testParseBytes(self):
        self.assertEqual(parseCollection(b'f_%d.exr [1-2]').indexes, [1, 2])

    def testParseNonAsciiDigits(self):
        for value in ('f_%٢d.exr [1]', 'f_%d.exr [١-٣]', 'f_%d.exr [1-٣]'):
            with self.assertRaises(exceptions.PatternMismatch, msg=value):
                parseCollection(value)

    def testParseMismatch(self):
        for value in ('nope', 'file_%02d.txt', 'file_%02d.txt [1-a]', 'file_%xd.txt [1]'):
            with self.assertRaises(exceptions.PatternMismatch, msg=value):
                parseCollection(value)

    def testParseErrors(self):
        table = [
            ('file_%02d.txt [1-]', exceptions.InvalidRangeFormat),
            ('file_%02d.txt [-1]', exceptions.InvalidRangeFormat),
            ('file_%02d.txt [1-2-3]', exceptions.InvalidRangeFormat),
            ('file_%02d.txt [1 2]', exceptions.InvalidNumber),
            ('file_%02d.txt [1, 2 3-4]', exceptions.InvalidNumber),
        ]
        for value, err in table:
            with self.assertRaises(err, msg=value):
                parseCollection(value)
            with self.assertRaises(exceptions.ParseException, msg=value):
                parseCollection(value)

    def testParseMaxSize(self):
        _maxSize = constants.MAX_INDEX_COUNT
        try:
            constants.MAX_INDEX_COUNT = 10
            self.assertEqual(len(parseCollection('f_%d [1-10]')), 10)
            self.assertRaises(exceptions.MaxSizeException, parseCollection, 'f_%d [1-11]')
        finally:
            constants.MAX_INDEX_COUNT = _maxSize


class TestParseRangeList(unittest.TestCase):

    def testParseRangeList(self):
        table = [
            ('', []),
            ('7', [7]),
            ('1-3, 7, 9-10', [1, 2, 3, 7, 9, 10]),
            (', 1,,2 ,', [1, 2]),
            ('5-3', [5, 4, 3]),
            ('3-3', [3]),
            (' 1 - 2 ', [1, 2]),
            ('007', [7]),
        ]
        for value, expected in table:
            self.assertEqual(parseRangeList(value), expected, value)

    def testParseRangeListErrors(self):
        table = [
            ('1-', exceptions.InvalidRangeFormat),
            ('-3', exceptions.InvalidRangeFormat),
            ('1-2-3', exceptions.InvalidRangeFormat),
            ('-', exceptions.InvalidRangeFormat),
            ('a', exceptions.InvalidNumber),
            ('1-b', exceptions.InvalidNumber),
            ('1.5', exceptions.InvalidNumber),
            ('١', exceptions.InvalidNumber),
            ('1-٣', exceptions.InvalidNumber),
        ]
        for value, err in table:
            with self.assertRaises(err, msg=value):
                parseRangeList(value)

    def testParseRangeListMaxSize(self):
        _maxSize = constants.MAX_INDEX_COUNT
        try:
            constants.MAX_INDEX_COUNT = 10
            self.assertEqual(len(parseRangeList('1-5, 6-10')), 10)
            self.assertRaises(exceptions.MaxSizeException, parseRangeList, '1-20')
            self.assertRaises(exceptions.MaxSizeException, parseRangeList, '1-5, 6-11')
        finally:
            constants.MAX_INDEX_COUNT = _maxSize


if __name__ == '__main__':
    unittest.main(verbosity=1)
