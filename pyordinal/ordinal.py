#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numbers
import operator

import numpy as np

from pyordinal.base import format_ordinal


class OrdinalRangeError(ValueError):
    '''
    An integer that does not correspond to any ordinal number of a particular width.
    '''


class OrdinalOverflowError(OrdinalRangeError, OverflowError):
    '''
    The integer is the largest one of the width (or beyond it), which is reserved so
    that every ordinal number has a successor.
    '''


class OrdinalUnderflowError(OrdinalRangeError):
    '''
    The integer would come before the first ordinal number.
    '''


class Ordinal:
    '''
    Ordinal numbers (first, second, third, ...) represented by fixed-width unsigned
    integers. Abstract class that is sub-typed once per width in this module.

    The value is kept 0-based, so `O32(0)` is the first ordinal and `O32(3)` the 4th.
    The largest integer of the width is never stored, because its successor could not
    be represented.
    '''

    __slots__ = ('_num',)

    num_bits = None
    max_value = None

    def __init__(self, num=0):
        '''
        Initialize the class with a 0-based integer value, which defaults to the first
        ordinal number.
        :param num: Integer value, anything with an `__index__()` e.g. a numpy integer.
        '''
        if self.max_value is None:
            raise TypeError(f"{self.__class__.__name__} has no integer width, use one of its subclasses")
        num = operator.index(num)
        if num < 0:
            raise OrdinalUnderflowError(f"value {num} comes before the first ordinal")
        if num >= self.max_value:
            raise OrdinalOverflowError(f"value {num} is too big for this ordinal type")
        object.__setattr__(self, '_num', num)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, (self._num,))

    @classmethod
    def first(cls):
        return cls(0)

    @classmethod
    def try_from0(cls, num):
        '''
        Ordinal number for a 0-based integer, or None if the integer is the largest of
        the width (or out of the width altogether).
        '''
        num = operator.index(num)
        if num in range(cls.max_value):
            return cls(num)
        return None

    @classmethod
    def try_from1(cls, num):
        '''
        Ordinal number for a 1-based integer, or None if the integer is 0 (or out of the
        width altogether).
        '''
        num = operator.index(num)
        if num in range(1, cls.max_value + 1):
            return cls(num - 1)
        return None

    @classmethod
    def from0(cls, num):
        '''
        Same as `try_from0()`, but raises OrdinalOverflowError for the largest integer
        of the width, and OrdinalUnderflowError for negative ones.
        '''
        return cls(num)

    @classmethod
    def from1(cls, num):
        '''
        Same as `try_from1()`, but raises OrdinalUnderflowError for 0.
        '''
        num = operator.index(num)
        if num == 0:
            raise OrdinalUnderflowError("0 is not a valid 1-based ordinal")
        return cls(num - 1)

    def into0(self):
        return self._num

    def into1(self):
        '''
        The 1-based integer. Always fits the width, since the largest 0-based value
        is one below the largest integer.
        '''
        return self._num + 1

    def next(self):
        return self.__class__.from0(self._num + 1)

    def __str__(self):
        return format_ordinal(self._num + 1)

    def __repr__(self):
        return str(self)

    def __format__(self, format_spec):
        '''
        Format specs apply to the text, e.g. `f"{o:>6}"`.
        '''
        return format(str(self), format_spec)

    def _same_width(self, o):
        return o.__class__ is self.__class__

    def __eq__(self, o):
        if not self._same_width(o):
            return NotImplemented
        return self._num == o._num

    def __ne__(self, o):
        if not self._same_width(o):
            return NotImplemented
        return self._num != o._num

    '''
    Only ordinals of the same width are ordered, there is no conversion between widths.
    '''
    def __lt__(self, o): return self._num < o._num if self._same_width(o) else NotImplemented
    def __le__(self, o): return self._num <= o._num if self._same_width(o) else NotImplemented
    def __gt__(self, o): return self._num > o._num if self._same_width(o) else NotImplemented
    def __ge__(self, o): return self._num >= o._num if self._same_width(o) else NotImplemented

    def __hash__(self):
        return hash((self.__class__, self._num))

    def __add__(self, o):
        if not isinstance(o, numbers.Integral):
            return NotImplemented
        return self.__class__.from0(self._num + operator.index(o))

    def __sub__(self, o):
        '''
        Subtracting an integer gives an earlier ordinal. Subtracting an ordinal of the
        same width gives the (signed) integer distance between the two.
        '''
        if self._same_width(o):
            return self._num - o._num
        if not isinstance(o, numbers.Integral):
            return NotImplemented
        return self.__class__.from0(self._num - operator.index(o))


class O8(Ordinal):
    '''
    Ordinal number represented by an 8-bit unsigned integer.
    '''

    __slots__ = ()
    num_bits = np.iinfo(np.uint8).bits
    max_value = int(np.iinfo(np.uint8).max)


class O16(Ordinal):
    '''
    Ordinal number represented by a 16-bit unsigned integer.
    '''

    __slots__ = ()
    num_bits = np.iinfo(np.uint16).bits
    max_value = int(np.iinfo(np.uint16).max)


class O32(Ordinal):
    '''
    Ordinal number represented by a 32-bit unsigned integer.
    '''

    __slots__ = ()
    num_bits = np.iinfo(np.uint32).bits
    max_value = int(np.iinfo(np.uint32).max)


class O64(Ordinal):
    '''
    Ordinal number represented by a 64-bit unsigned integer.
    '''

    __slots__ = ()
    num_bits = np.iinfo(np.uint64).bits
    max_value = int(np.iinfo(np.uint64).max)


class O128(Ordinal):
    '''
    Ordinal number represented by a 128-bit unsigned integer. numpy has no such dtype,
    so the bounds are computed directly.
    '''

    __slots__ = ()
    num_bits = 128
    max_value = (2 ** 128) - 1  # 0xFFF... or 0b111...


class Osize(Ordinal):
    '''
    Ordinal number represented by the platform's pointer-sized unsigned integer.
    '''

    __slots__ = ()
    num_bits = np.iinfo(np.uintp).bits
    max_value = int(np.iinfo(np.uintp).max)


ORDINAL_TYPES = {cls.__name__: cls for cls in (O8, O16, O32, O64, O128, Osize)}


def ordinal0(num, cls=Osize):
    '''
    0-based ordinal number, e.g. `ordinal0(4)` is the 5th.
    '''
    return cls.from0(num)


def ordinal1(num, cls=Osize):
    '''
    1-based ordinal number, e.g. `ordinal1(4)` is the 4th.
    '''
    return cls.from1(num)
