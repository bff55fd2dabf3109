"""
assembly - Discover collections within an unordered list of strings.
"""
from __future__ import annotations

import logging
import re
import typing

from . import constants, utils
from .collection import Collection
from .exceptions import SeqoException

logger = logging.getLogger(__name__)


def assemble(
        strings: typing.Iterable[typing.Any],
        patterns: typing.Optional[typing.Iterable[typing.Union[str, re.Pattern]]] = None,
        min_items: typing.Optional[int] = None,
        case_sensitive: bool = True,
        assume_padded_when_ambiguous: bool = False
        ) -> typing.Tuple[typing.List[Collection], typing.List[str]]:
    """
    Return the collections found in strings, and the strings that do not
    belong to any of them. This does not try to determine if the strings
    name anything that exists, it just groups them.

    Every occurrence of every pattern in each string splits the string into a
    head, a numeral and a tail. Matches sharing head, tail and padding width
    form one collection. A numeral with leading zeros is padded to its full
    width, any other numeral is unpadded.

    Examples:
        >>> collections, remainder = assemble(
        ...     ['shot_001.exr', 'shot_002.exr', 'other.txt'])
        >>> collections
        [<Collection: 'shot_%03d.exr [1-2]'>]
        >>> remainder
        ['other.txt']

    The ``patterns`` argument restricts which numerals are considered,
    for instance only frame numbers between dots::

        assemble(paths, patterns=[seqo.PATTERNS['frames']])

    Unpadded numerals that are exactly as wide as a padded collection of the
    same head and tail are moved into it, so that 0998, 0999, 1000 and 1001
    form a single 4-padded collection.

    Args:
        strings (collections.Iterable[str]): the strings to group
        patterns (list[str or re.Pattern]): patterns providing an ``index``
            group and optionally a ``padding`` group. Defaults to
            ``seqo.constants.DIGITS_PATTERN``. An empty list disables
            assembly.
        min_items (int): smallest number of indexes a collection must hold,
            defaults to ``seqo.constants.DEFAULT_MIN_ITEMS``
        case_sensitive (bool): if False, heads and tails differing only in case
            are grouped together, keeping the first seen spelling
        assume_padded_when_ambiguous (bool): if True, an unpadded collection
            whose indexes all share one width of two or more digits is
            treated as padded to that width

    Returns:
        tuple: (list[:class:`Collection`], list[str])

    Raises:
        :class:`seqo.exceptions.SeqoException`: if a pattern has no ``index`` group
    """
    if min_items is None:
        min_items = constants.DEFAULT_MIN_ITEMS

    strings = [utils.asString(item) for item in strings]

    if patterns is not None:
        patterns = list(patterns)
        if not patterns:
            return [], strings

    compiled = _compilePatterns(patterns, case_sensitive)

    buckets: typing.Dict[typing.Tuple[str, str, int], Collection] = {}
    remainder: typing.List[str] = []

    for item in strings:
        matched = False
        for pattern in compiled:
            for match in pattern.finditer(item):
                index = match.group('index')
                if not index or not utils.isDigits(index):
                    continue
                head = item[:match.start('index')]
                tail = item[match.end('index'):]
                padding = _paddingWidth(match, index)
                key = _bucketKey(head, tail, padding, case_sensitive)
                collection = buckets.get(key)
                if collection is None:
                    collection = buckets[key] = Collection(head, tail, padding)
                collection.add(int(index))
                matched = True
        if not matched:
            remainder.append(item)

    logger.debug("assembled %d strings into %d candidate collections, %d unmatched",
                 len(strings), len(buckets), len(remainder))

    _mergePaddingBoundaries(buckets)

    collections: typing.List[Collection] = []
    filtered: typing.List[Collection] = []
    for collection in buckets.values():
        if not collection:
            # fully absorbed by a padded collection
            continue
        if len(collection) >= min_items:
            collections.append(collection)
        else:
            filtered.append(collection)

    # members of a filtered collection go back to the remainder,
    # unless they are already there or belong to a kept collection
    seen = set(remainder)
    if filtered:
        for collection in collections:
            seen.update(collection.members)
    for collection in filtered:
        logger.debug("filtered %r with fewer than %d items", collection, min_items)
        for member in collection:
            if member in seen:
                continue
            seen.add(member)
            remainder.append(member)

    if assume_padded_when_ambiguous:
        for collection in collections:
            if collection.padding or not collection:
                continue
            width = utils.digitCount(collection.start())
            if width > 1 and width == utils.digitCount(collection.end()):
                logger.debug("assuming %r is padded to %d", collection, width)
                collection.padding = width

    remainder.sort(key=utils.remainderSortKey)
    return collections, remainder


def _compilePatterns(
        patterns: typing.Optional[typing.List[typing.Union[str, re.Pattern]]],
        case_sensitive: bool
        ) -> typing.List[re.Pattern]:
    """
    Compile assembly patterns, applying case sensitivity to each.

    Raises:
        :class:`seqo.exceptions.SeqoException`: if a pattern has no ``index`` group
    """
    flags = 0 if case_sensitive else re.IGNORECASE
    if patterns is None:
        patterns = [constants.DIGITS_PATTERN]

    compiled = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            if flags and not pattern.flags & re.IGNORECASE:
                pattern = re.compile(pattern.pattern, pattern.flags | flags)
        else:
            pattern = re.compile(utils.asString(pattern), flags)

        if 'index' not in pattern.groupindex:
            msg = 'Assembly pattern {0!r} does not define an "index" group'
            raise SeqoException(msg.format(pattern.pattern))
        compiled.append(pattern)

    return compiled


def _paddingWidth(match: re.Match, index: str) -> int:
    """
    Return the padding width of a matched numeral, or 0 if it has no
    leading zero.
    """
    if 'padding' in match.re.groupindex:
        padded = bool(match.group('padding'))
    else:
        padded = len(index) > 1 and index.startswith('0')
    return len(index) if padded else 0


def _bucketKey(head: str, tail: str, padding: int, case_sensitive: bool) -> typing.Tuple[str, str, int]:
    if not case_sensitive:
        head = head.lower()
        tail = tail.lower()
    return head, tail, padding


def _mergePaddingBoundaries(buckets: typing.Dict[typing.Tuple[str, str, int], Collection]) -> None:
    """
    Move indexes of each unpadded collection into the padded collection of
    the same head and tail whose width they already fill.
    For example 0998-0999 absorbs 1000-1001 into 0998-1001.
    """
    for (head, tail, padding), collection in buckets.items():
        if not padding:
            continue
        candidate = buckets.get((head, tail, 0))
        if not candidate:
            continue
        absorbed = [index for index in candidate.indexes if utils.digitCount(index) == padding]
        if not absorbed:
            continue
        logger.debug("moving %d indexes from %r into %r", len(absorbed), candidate, collection)
        collection.add(absorbed)
        candidate.remove(absorbed)
