#! /usr/bin/env python
"""
exceptions - Exception subclasses relevant to seqo operations.
"""


class SeqoException(ValueError):
    """
    Thrown for general exceptions handled by seqo.
    """
    pass


class ValidationError(SeqoException):
    """
    Thrown when a :class:`~seqo.collection.Collection` is built or updated
    with an invalid padding or index.
    """
    pass


class InvalidIndex(ValidationError):
    """
    Thrown when an index is not a non-negative integer, or when a strict
    removal names an index that is not a member.
    """
    pass


class PatternMismatch(SeqoException):
    """
    Thrown when a string does not match the expected collection expression
    or parse pattern.
    """
    pass


class InvalidItemType(SeqoException, TypeError):
    """
    Thrown when an item is not an index, a member string or a Collection.
    """
    pass


class IncompatibleCollection(SeqoException):
    """
    Thrown when two collections do not share the same head, tail and padding.
    """
    pass


class MaxSizeException(SeqoException):
    """
    Thrown when a range expansion exceeds allowable size.
    """
    pass


class ParseException(SeqoException):
    """
    Thrown after a range list parse error.
    """
    pass


class InvalidRangeFormat(ParseException):
    """
    Thrown when a range part is neither ``N`` nor ``N-M``.
    """
    pass


class InvalidNumber(ParseException):
    """
    Thrown when one side of a range part is not an integer.
    """
    pass


class ArgumentTypeError(SeqoException, TypeError):
    """
    Thrown when :class:`~seqo.utils.seqrange` receives a non-integer argument.
    """
    pass


class ZeroStepError(SeqoException):
    """
    Thrown when :class:`~seqo.utils.seqrange` receives a zero step.
    """
    pass


class IncompatibleStepError(SeqoException):
    """
    Thrown when the sign of a :class:`~seqo.utils.seqrange` step moves away
    from its stop value.
    """
    pass
