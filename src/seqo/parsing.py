"""
parsing - Rebuild a collection from its formatted description.
"""
from __future__ import annotations

import logging
import re
import typing

from . import constants, utils
from .collection import Collection
from .constants import DEFAULT_FORMAT, PARSE_EXPRESSIONS, PLACEHOLDER_RE
from .exceptions import InvalidNumber, InvalidRangeFormat, PatternMismatch

logger = logging.getLogger(__name__)

# Expressions used when a placeholder appears more than once in a pattern
_BACKREFERENCES = {
    'padding': r'%(?P=padding)d',
}


def parseCollection(value: str, pattern: str = DEFAULT_FORMAT) -> Collection:
    """
    Parse a string formatted by :meth:`Collection.format` back into a
    :class:`Collection`.

    The pattern supports the placeholders of :meth:`Collection.format`.
    Indexes described by ``{range}`` and ``{ranges}`` are added, then
    indexes described by ``{holes}`` are removed, wherever the placeholders
    appear in the pattern.

    Examples:
        >>> parseCollection('file_%02d.txt [1-2, 4-5, 7]').indexes
        [1, 2, 4, 5, 7]
        >>> c = parseCollection('file_%02d.txt [1-10] [4-6]',
        ...                     pattern='{head}{padding}{tail} [{ranges}] [{holes}]')
        >>> c.indexes
        [1, 2, 3, 7, 8, 9, 10]

    Args:
        value (str): the formatted collection
        pattern (str): the template value was formatted with

    Returns:
        :class:`Collection`:

    Raises:
        :class:`seqo.exceptions.PatternMismatch`: if value does not match pattern
        :class:`seqo.exceptions.InvalidRangeFormat`: if a range part is malformed
        :class:`seqo.exceptions.InvalidNumber`: if a range bound is not an integer
        :class:`seqo.exceptions.MaxSizeException`: if the ranges exceed
            ``seqo.constants.MAX_INDEX_COUNT``
    """
    value = utils.asString(value)
    regex = patternToRegex(pattern)
    logger.debug("parsing %r with %r", value, regex.pattern)

    match = regex.fullmatch(value)
    if match is None:
        msg = 'Value {0!r} did not match pattern {1!r}'
        raise PatternMismatch(msg.format(value, pattern))

    groups = match.groupdict()
    padding = int(groups['padding']) if groups.get('padding') else 0
    collection = Collection(groups.get('head') or '', groups.get('tail') or '', padding)

    for key in ('range', 'ranges'):
        if groups.get(key):
            collection.add(parseRangeList(groups[key]))

    if groups.get('holes'):
        collection.remove(parseRangeList(groups['holes']))

    return collection


def patternToRegex(pattern: str) -> re.Pattern:
    """
    Translate a format pattern into a compiled regular expression, escaping
    its literal text and replacing each known placeholder with a capturing
    group. Unknown placeholders are matched literally.

    Args:
        pattern (str):

    Returns:
        re.Pattern:
    """
    parts = []
    seen = set()
    position = 0
    for match in PLACEHOLDER_RE.finditer(pattern):
        parts.append(re.escape(pattern[position:match.start()]))
        position = match.end()

        key = match.group(1).lower()
        if key not in PARSE_EXPRESSIONS:
            parts.append(re.escape(match.group(0)))
        elif key in seen:
            parts.append(_BACKREFERENCES.get(key, '(?P={0})'.format(key)))
        else:
            seen.add(key)
            parts.append(PARSE_EXPRESSIONS[key])

    parts.append(re.escape(pattern[position:]))
    return re.compile(''.join(parts), re.DOTALL)


def parseRangeList(value: str) -> typing.List[int]:
    """
    Return the indexes described by a comma separated list of ranges, where
    each part is either a single index ``N`` or an inclusive range ``N-M``.
    Empty parts are ignored.

    Examples:
        >>> parseRangeList('1-3, 7, 9-10')
        [1, 2, 3, 7, 9, 10]

    Args:
        value (str):

    Returns:
        list[int]:

    Raises:
        :class:`seqo.exceptions.InvalidRangeFormat`: if a part is malformed
        :class:`seqo.exceptions.InvalidNumber`: if a bound is not an integer
        :class:`seqo.exceptions.MaxSizeException`: if the ranges exceed
            ``seqo.constants.MAX_INDEX_COUNT``
    """
    indexes: typing.List[int] = []
    for part in value.split(','):
        # this is to deal with leading / trailing commas
        part = part.strip()
        if not part:
            continue

        start, sep, end = part.partition('-')
        if not start.strip() or (sep and not end.strip()) or '-' in end:
            msg = 'Invalid range {0!r}: expected "N" or "N-M"'
            raise InvalidRangeFormat(msg.format(part))

        first = _parseNumber(start, part)
        if not sep:
            indexes.append(first)
        else:
            last = _parseNumber(end, part)
            indexes.extend(utils.inclusiveRange(first, last, maxSize=constants.MAX_INDEX_COUNT))
        utils.maxSizeCheck(len(indexes))

    return indexes


def _parseNumber(text: str, part: str) -> int:
    text = text.strip()
    if not utils.isDigits(text):
        msg = 'Invalid number {0!r} in range {1!r}'
        raise InvalidNumber(msg.format(text, part))
    return int(text)
