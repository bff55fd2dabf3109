"""
collection - A set-like object representing numbered members for seqo.
"""
from __future__ import annotations

import numbers
import re
import typing
from collections.abc import Iterable

from .constants import DEFAULT_FORMAT, PATTERNS, PLACEHOLDER_RE
from .exceptions import (SeqoException, ValidationError, InvalidIndex,
                         InvalidItemType, IncompatibleCollection, PatternMismatch)
from . import utils


class Collection(object):
    """
    A ``Collection`` is a mutable set of non-negative integer indexes that
    share a template: a literal ``head``, a literal ``tail`` and a zero
    ``padding`` width. Each index renders to a member string:

        >>> c = Collection('file_', '.txt', 2, [3, 1, 2])
        >>> c.indexes
        [1, 2, 3]
        >>> c.members
        ['file_01.txt', 'file_02.txt', 'file_03.txt']

    A padding of 0 means indexes render at their natural width. Members of an
    unpadded collection can never have a leading zero, while members of a
    padded collection must be exactly ``padding`` digits wide:

        >>> Collection('v', '', 0).match('v01') is None
        True
        >>> Collection('v', '', 3).match('v001').group('index')
        '001'

    Indexes are added and removed in place, either as integers, member
    strings or other compatible collections:

        >>> c.add([5, 'file_07.txt']).remove(2)
        <Collection: 'file_%02d.txt [1, 3, 5, 7]'>

    The format method renders the collection through a template, and
    :func:`seqo.parseCollection` reverses it:

        >>> c.format('{head}{padding}{tail} [{ranges}] holes: {holes}')
        'file_%02d.txt [1, 3, 5, 7] holes: 2, 4, 6'

    Caveats:
        1. Two collections are compatible when they share head, tail and
           padding, regardless of their indexes. Only compatible collections
           can be merged into, or removed from, one another.
        2. Equality compares the template and the index set.
        3. Collections are mutable, and therefore unhashable.

    Args:
        head (str): literal prefix of every member
        tail (str): literal suffix of every member
        padding (int): zero padding width, or 0 for none
        indexes (collections.Iterable of int): initial indexes

    Raises:
        :class:`.ValidationError`: if padding or any index is not a
            non-negative integer
    """
    PATTERNS = PATTERNS

    def __init__(self, head: str = '', tail: str = '', padding: int = 0,
                 indexes: typing.Optional[typing.Iterable[int]] = None) -> None:
        self.head = head
        self.tail = tail
        self.padding = padding

        self._indexes: typing.Set[int] = set()
        if indexes is not None:
            if not isinstance(indexes, Iterable) or isinstance(indexes, (str, bytes)):
                raise ValidationError(
                    'Collection indexes must be an iterable of integers, got {0!r}'.format(indexes))
            self._indexes.update(self._checkIndex(index) for index in indexes)

    @property
    def padding(self) -> int:
        """
        The zero padding width of each member, 0 when unpadded.

        Returns:
            int:
        """
        return self._padding

    @padding.setter
    def padding(self, value: int) -> None:
        if not utils.isIndexValue(value) or value < 0:
            raise ValidationError(
                'Collection padding must be a non-negative integer, got {0!r}'.format(value))
        self._padding = int(value)

    @property
    def indexes(self) -> typing.List[int]:
        """
        Read-only access to the indexes of this :class:`Collection`, in
        ascending order.

        Returns:
            list:
        """
        return sorted(self._indexes)

    @property
    def members(self) -> typing.List[str]:
        """
        Read-only access to the member strings of this :class:`Collection`,
        in ascending index order.

        Returns:
            list:
        """
        return [self.member(index) for index in self.indexes]

    @property
    def holes(self) -> typing.Optional[Collection]:
        """
        A new :class:`Collection` holding every index missing between the
        smallest and largest index, or None if nothing is missing.

        Examples:
            >>> Collection(indexes=[1, 4, 7]).holes.indexes
            [2, 3, 5, 6]
            >>> Collection(indexes=[1, 2, 3]).holes is None
            True

        Returns:
            :class:`Collection` or None:

        Raises:
            :class:`seqo.exceptions.MaxSizeException`: if the number of holes
                exceeds ``seqo.constants.MAX_INDEX_COUNT``
        """
        if self.isContiguous:
            return None

        indexes = self.indexes
        utils.maxSizeCheck(indexes[-1] - indexes[0] + 1 - len(indexes))

        missing: typing.List[int] = []
        for index, next_index in zip(indexes, indexes[1:]):
            if next_index - index > 1:
                missing.extend(utils.seqrange(index + 1, next_index))
        return self._subCollection(missing)

    @property
    def isContiguous(self) -> bool:
        """
        Whether every index between the smallest and largest index is
        present. Collections of zero or one index are contiguous.

        Returns:
            bool:
        """
        if len(self._indexes) <= 1:
            return True
        return max(self._indexes) - min(self._indexes) + 1 == len(self._indexes)

    def start(self) -> int:
        """
        The smallest index in the :class:`Collection`.

        Returns:
            int:

        Raises:
            :class:`IndexError`: (with an empty :class:`Collection`)
        """
        if not self._indexes:
            raise IndexError('start of an empty Collection')
        return min(self._indexes)

    def end(self) -> int:
        """
        The largest index in the :class:`Collection`.

        Returns:
            int:

        Raises:
            :class:`IndexError`: (with an empty :class:`Collection`)
        """
        if not self._indexes:
            raise IndexError('end of an empty Collection')
        return max(self._indexes)

    def member(self, index: int) -> str:
        """
        Return the member string for the given index, whether or not it is
        present in the :class:`Collection`.

        Examples:
            >>> Collection('file_', '.txt', 4).member(12)
            'file_0012.txt'

        Args:
            index (int):

        Returns:
            str:
        """
        return "".join((self.head, utils.pad(index, self._padding), self.tail))

    def copy(self) -> Collection:
        """
        Create a copy of this collection with its own index storage.

        Returns:
            :class:`Collection`:
        """
        col = self.__class__.__new__(self.__class__)
        col.__dict__ = self.__dict__.copy()
        col._indexes = set(self._indexes)
        return col

    def isCompatible(self, other: typing.Any) -> bool:
        """
        Return whether other is a :class:`Collection` sharing this one's head,
        tail and padding.

        Args:
            other (:class:`Collection`):

        Returns:
            bool:
        """
        return (
            isinstance(other, Collection) and
            other.head == self.head and
            other.tail == self.tail and
            other.padding == self._padding
        )

    def match(self, item: str) -> typing.Optional[re.Match]:
        """
        Test whether a string is a valid member of this collection's template,
        whether or not its index is currently present.

        Only ASCII digits form a numeral. An unpadded collection rejects
        numerals with a leading zero (a lone "0" is allowed). A padded
        collection rejects numerals whose width is not exactly the padding.

        Args:
            item (str): candidate member string

        Returns:
            :class:`re.Match` or None: the match, with groups ``index`` (the
            numeral) and ``padding`` (its leading zeros)
        """
        if not isinstance(item, str):
            return None

        match = self._expression().match(item)
        if match is None:
            return None

        if self._padding == 0:
            if match.group('padding'):
                return None
        elif len(match.group('index')) != self._padding:
            return None

        return match

    def add(self, items: typing.Any) -> Collection:
        """
        Add indexes to the :class:`Collection`.

        ``items`` is a single item or an iterable of items, where an item is
        an index, a member string or a compatible :class:`Collection`. Every
        item is validated before any is added, so a failure leaves the
        collection unchanged. Indexes already present are ignored.

        Args:
            items (int or str or :class:`Collection` or collections.Iterable):

        Returns:
            :class:`Collection`: self

        Raises:
            :class:`seqo.exceptions.InvalidIndex`: for a negative or non-integer index
            :class:`seqo.exceptions.PatternMismatch`: for a string that is not a member
            :class:`seqo.exceptions.IncompatibleCollection`: for an incompatible collection
            :class:`seqo.exceptions.InvalidItemType`: for any other item
        """
        additions: typing.Set[int] = set()
        for item in self._iterItems(items):
            additions.update(self._resolve(item))
        self._indexes.update(additions)
        return self

    def remove(self, items: typing.Any, strict: bool = False) -> Collection:
        """
        Remove indexes from the :class:`Collection`.

        Accepts the same items as :meth:`add`. By default invalid,
        incompatible and absent items are skipped. When ``strict`` is True the
        first such item raises, and removals made for the items before it are
        kept. An index named more than once in the same call is only
        required to be present the first time.

        Args:
            items (int or str or :class:`Collection` or collections.Iterable):
            strict (bool): raise on the first item that can not be removed

        Returns:
            :class:`Collection`: self

        Raises:
            :class:`seqo.exceptions.InvalidIndex`: for an invalid or absent index
            :class:`seqo.exceptions.PatternMismatch`: for a string that is not a member
            :class:`seqo.exceptions.IncompatibleCollection`: for an incompatible collection
            :class:`seqo.exceptions.InvalidItemType`: for any other item
        """
        removed: typing.Set[int] = set()
        for item in self._iterItems(items):
            try:
                indexes = self._resolve(item)
                if strict:
                    for index in indexes:
                        if index not in self._indexes and index not in removed:
                            raise InvalidIndex(
                                'Index {0} is not a member of {1!r}'.format(index, self))
            except SeqoException:
                if strict:
                    raise
                continue
            self._indexes.difference_update(indexes)
            removed.update(indexes)
        return self

    def merge(self, other: Collection) -> Collection:
        """
        Add all indexes of another compatible :class:`Collection`.

        Args:
            other (:class:`Collection`):

        Returns:
            :class:`Collection`: self

        Raises:
            :class:`seqo.exceptions.IncompatibleCollection`:
            :class:`seqo.exceptions.InvalidItemType`: if other is not a Collection
        """
        if not isinstance(other, Collection):
            raise InvalidItemType('Can only merge a Collection, got {0!r}'.format(other))
        return self.add(other)

    def separate(self) -> typing.List[Collection]:
        """
        Split the :class:`Collection` into contiguous pieces and return them
        as a list of new :class:`Collection` instances, ordered by their
        first index.

        An empty collection separates into a single empty collection.

        Examples:
            >>> [c.indexes for c in Collection(indexes=[5, 1, 2, 7, 6]).separate()]
            [[1, 2], [5, 6, 7]]

        Returns:
            list[:class:`Collection`]:
        """
        result = []
        start = end = None
        for index in self.indexes:
            if start is None:
                start = end = index
                continue
            if index != end + 1:
                result.append(self._subCollection(utils.inclusiveRange(start, end)))
                start = index
            end = index

        if start is None:
            result.append(self._subCollection())
        else:
            result.append(self._subCollection(utils.inclusiveRange(start, end)))
        return result

    def format(self, pattern: str = DEFAULT_FORMAT) -> str:
        """
        Return the collection as a formatted string according to the given
        pattern.

        Available placeholders, matched case-insensitively:
            * head - the head of the collection.
            * tail - the tail of the collection.
            * padding - printf style padding, ie %04d, or %d when unpadded.
            * range - the full extent of the indexes, ie 1-10.
            * ranges - comma separated contiguous pieces, ie 1-3, 5, 7-9.
            * holes - the ranges of the missing indexes. (returns "" if none)

        Unknown placeholders are left as is. The range placeholders are only
        computed when the pattern asks for them.

        Examples:
            >>> Collection('file_', '.txt', 2, [1, 2, 4, 5, 7]).format()
            'file_%02d.txt [1-2, 4-5, 7]'

        Args:
            pattern (str):

        Returns:
            str:

        Raises:
            :class:`seqo.exceptions.MaxSizeException`: if asking for holes,
                and their number exceeds ``seqo.constants.MAX_INDEX_COUNT``
        """
        getters = {
            'head': lambda: self.head,
            'tail': lambda: self.tail,
            'padding': self._formatPadding,
            'range': self._formatRange,
            'ranges': self._formatRanges,
            'holes': self._formatHoles,
        }
        values: typing.Dict[str, str] = {}

        def replace(match: re.Match) -> str:
            key = match.group(1).lower()
            if key not in getters:
                return match.group(0)
            if key not in values:
                values[key] = getters[key]()
            return values[key]

        return PLACEHOLDER_RE.sub(replace, pattern)

    def _formatPadding(self) -> str:
        if self._padding:
            return '%0{0}d'.format(self._padding)
        return '%d'

    def _formatRange(self) -> str:
        if not self._indexes:
            return ''
        start, end = min(self._indexes), max(self._indexes)
        if start == end:
            return str(start)
        return '{0}-{1}'.format(start, end)

    def _formatRanges(self) -> str:
        pieces = self.separate()
        if len(pieces) == 1:
            return self._formatRange()
        return ', '.join(piece._formatRange() for piece in pieces)

    def _formatHoles(self) -> str:
        holes = self.holes
        if holes is None:
            return ''
        return holes._formatRanges()

    def _expression(self) -> re.Pattern:
        # recompiled only when head or tail change
        key = (self.head, self.tail)
        cached = self.__dict__.get('_expressionCache')
        if cached is None or cached[0] != key:
            # non-greedy digits, so a tail starting with digits still matches
            regex = re.compile(r'\A{0}(?P<index>(?P<padding>0*)[0-9]+?){1}\Z'.format(
                re.escape(self.head), re.escape(self.tail)))
            cached = self._expressionCache = (key, regex)
        return cached[1]

    def _subCollection(self, indexes: typing.Optional[typing.Iterable[int]] = None) -> Collection:
        return self.__class__(self.head, self.tail, self._padding, indexes)

    def _resolve(self, item: typing.Any) -> typing.Collection[int]:
        """
        Return the indexes an add or remove item refers to.

        Raises:
            :class:`seqo.exceptions.SeqoException`: if the item is invalid
        """
        if isinstance(item, Collection):
            if not self.isCompatible(item):
                raise IncompatibleCollection(
                    '{0!r} is not compatible with {1!r}'.format(item, self))
            return frozenset(item._indexes)

        if isinstance(item, str):
            match = self.match(item)
            if match is None:
                raise PatternMismatch(
                    "Item '{0}' does not match collection expression '{1}'.".format(
                        item, self.format('{head}{padding}{tail}')))
            return (int(match.group('index')),)

        if isinstance(item, numbers.Number):
            return (self._checkIndex(item),)

        raise InvalidItemType(
            'Invalid item type: {0}. Expected int, str or Collection.'.format(
                type(item).__name__))

    @staticmethod
    def _iterItems(items: typing.Any) -> typing.Iterable[typing.Any]:
        if isinstance(items, (str, bytes, Collection)) or not isinstance(items, Iterable):
            return (items,)
        return items

    @staticmethod
    def _checkIndex(index: typing.Any) -> int:
        if not utils.isIndexValue(index) or index < 0:
            raise InvalidIndex(
                'Invalid index: {0!r}. Expected non-negative integer.'.format(index))
        return int(index)

    def __len__(self) -> int:
        """
        The number of indexes in this :class:`Collection`.

        Returns:
            int:
        """
        return len(self._indexes)

    def __iter__(self) -> typing.Iterator[str]:
        """
        Iterate over the member strings, in ascending index order.

        Yields:
            str:
        """
        return iter(self.members)

    def __contains__(self, item: typing.Any) -> bool:
        """
        Check if an index, or the index of a member string, is present.

        Args:
            item (int or str):

        Returns:
            bool:
        """
        if isinstance(item, str):
            match = self.match(item)
            return match is not None and int(match.group('index')) in self._indexes
        if utils.isIndexValue(item):
            return item in self._indexes
        return False

    def __eq__(self, other: typing.Any) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self.isCompatible(other) and self._indexes == other._indexes

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return "<%s: '%s'>" % (self.__class__.__name__, self.format())
