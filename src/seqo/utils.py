"""
utils - General tools of use to seqo operations.
"""
from __future__ import annotations

import numbers
import os
import sys
import typing
from itertools import count, islice

from . import constants, exceptions


FILESYSTEM_ENCODING = sys.getfilesystemencoding() or 'utf-8'


def isIndexValue(value: typing.Any) -> bool:
    """
    Check that a value is an integer, excluding booleans.

    Args:
        value: value to check

    Returns:
        bool:
    """
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def lenRange(start: int, stop: int, step: int = 1) -> int:
    """
    Get the length of values for a given range, exclusive of the stop

    Args:
        start (int):
        stop (int):
        step (int):
    """
    if not step:
        raise exceptions.ZeroStepError('step argument must not be zero')

    if step > 0:
        result = (stop - start + step - 1) // step
    else:
        result = (stop - start + step + 1) // step

    return max(0, result)


class seqrange(object):
    """
    A lazy arithmetic sequence of integers, in the manner of the builtin
    ``range``, with stricter argument checking.

    With a single argument the value is the stop, start is 0, and the step
    defaults to 1 or -1 so that it always travels towards the stop:

        >>> list(seqrange(3))
        [0, 1, 2]
        >>> list(seqrange(-3))
        [0, -1, -2]
        >>> list(seqrange(5, 0, -1))
        [5, 4, 3, 2, 1]

    A step whose sign moves away from the stop is an error rather than an
    empty range. A range whose start equals its stop is always empty.

    Args:
        start (int): first value, or the stop when it is the only argument
        stop (int): exclusive end value
        step (int): increment between values

    Raises:
        :class:`seqo.exceptions.ArgumentTypeError`: if an argument is not an integer
        :class:`seqo.exceptions.ZeroStepError`: if step is zero
        :class:`seqo.exceptions.IncompatibleStepError`: if the step moves away from stop
    """

    __slots__ = ['_len', '_start', '_stop', '_step']

    def __init__(self, start: int = 0, stop: typing.Optional[int] = None, step: typing.Optional[int] = None):
        if stop is None:
            start, stop = 0, start

        for name, value in (('start', start), ('stop', stop), ('step', step)):
            if name == 'step' and value is None:
                step = value = 1 if start <= stop else -1
            if not isIndexValue(value):
                raise exceptions.ArgumentTypeError(
                    'seqrange() {0} argument must be an integer, got {1!r}'.format(name, value))

        if step == 0:
            raise exceptions.ZeroStepError('seqrange() step argument must not be zero')

        if (start < stop and step < 0) or (start > stop and step > 0):
            raise exceptions.IncompatibleStepError(
                'seqrange() step {0} is incompatible with start {1} and stop {2}'.format(
                    step, start, stop))

        self._start = int(start)
        self._stop = int(stop)
        self._step = int(step)
        self._len = lenRange(self._start, self._stop, self._step)

    def __repr__(self) -> str:
        if self._step == 1:
            return 'seqrange({}, {})'.format(self._start, self._stop)
        else:
            return 'seqrange({}, {}, {})'.format(self._start, self._stop, self._step)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> typing.Iterator[int]:
        return islice(count(self._start, self._step), self._len)

    def __contains__(self, value: typing.Any) -> bool:
        if not isIndexValue(value) or not self._len:
            return False
        offset = value - self._start
        return offset % self._step == 0 and 0 <= offset // self._step < self._len

    @property
    def start(self) -> int:
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    @property
    def step(self) -> int:
        return self._step


def inclusiveRange(start: int, end: int, maxSize: int = -1) -> seqrange:
    """
    Returns a :class:`seqrange` from start to end, inclusive, travelling
    down when end is less than start.

    Args:
        start (int):
        end (int):
        maxSize (int): largest allowed length, negative for no limit

    Returns:
        seqrange:

    Raises:
        :class:`seqo.exceptions.MaxSizeException`: if size is exceeded
    """
    if start <= end:
        rng = seqrange(start, end + 1)
    else:
        rng = seqrange(start, end - 1)

    if 0 <= maxSize < len(rng):
        raise exceptions.MaxSizeException(
            "Size %d > %s (MAX_INDEX_COUNT)" % (len(rng), maxSize))

    return rng


def maxSizeCheck(size: int) -> None:
    """
    Raise if a number of indexes exceeds ``seqo.constants.MAX_INDEX_COUNT``.

    Args:
        size (int):

    Raises:
        :class:`seqo.exceptions.MaxSizeException`:
    """
    if size > constants.MAX_INDEX_COUNT:
        raise exceptions.MaxSizeException(
            "Size %d > %s (MAX_INDEX_COUNT)" % (size, constants.MAX_INDEX_COUNT))


def digitCount(index: int) -> int:
    """
    Return the number of decimal digits an index renders to without padding.
    """
    return len(str(abs(index)))


def pad(number: int, width: int = 0) -> str:
    """
    Return the zero-padded string of a given number.

    Args:
        number (int): the number to pad
        width (int): width for zero padding

    Returns:
        str:
    """
    return str(number).zfill(width)


def remainderSortKey(item: str) -> tuple:
    """
    Sort key placing ASCII digit strings first, in numeric order, followed by
    every other string in lexical order.

    Args:
        item (str):

    Returns:
        tuple:
    """
    if isDigits(item):
        return (0, int(item), item)
    return (1, 0, item)


def isDigits(text: str) -> bool:
    """
    Check that a string is a non-empty run of ASCII digits 0-9.

    Args:
        text (str):

    Returns:
        bool:
    """
    return text.isascii() and text.isdigit()


_STR_TYPES = frozenset((str, bytes))


def asString(obj: object) -> str:
    """
    Ensure an object is explicitly str type
    and not some derived type that can change semantics.

    If the object is str, return str.
    Otherwise, return the string conversion of the object.

    Args:
        obj: Object to return as str

    Returns:
        str:
    """
    typ = type(obj)
    # explicit type check as faster path
    if typ in _STR_TYPES:
        if typ is bytes:
            obj = os.fsdecode(obj)  # type: ignore
        return obj  # type: ignore
    # derived type check
    elif isinstance(obj, bytes):
        obj = obj.decode(FILESYSTEM_ENCODING)
    elif isinstance(obj, os.PathLike):
        obj = os.fspath(obj)
    else:
        obj = str(obj)
    return str(obj)
