#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import numpy as np

from pyordinal.ordinal import O8, O16, O32, O64, O128, Osize

'''
Numeric interchange for ordinal numbers. The wire form of an ordinal is its 0-based
integer, with a fixed width per ordinal type so that it is the same on every platform.
'''

WIRE_DTYPES = {
    O8: np.dtype(np.uint8),
    O16: np.dtype(np.uint16),
    O32: np.dtype(np.uint32),
    O64: np.dtype(np.uint64),
    O128: np.dtype(object),  # no 128-bit integer dtype, so plain Python ints
    Osize: np.dtype(np.uint64),  # regardless of the platform's pointer size
}


def wire_dtype(cls):
    '''
    The numpy dtype an ordinal type is written as.
    '''
    try:
        return WIRE_DTYPES[cls]
    except KeyError:
        raise TypeError(f"{cls!r} is not an ordinal type") from None


def to_wire(o):
    '''
    0-based integer of an ordinal, as a numpy scalar of its wire dtype.
    '''
    dtype = wire_dtype(o.__class__)
    if dtype == np.dtype(object):
        return o.into0()
    return dtype.type(o.into0())


def from_wire(cls, value):
    '''
    Ordinal from a 0-based wire integer. The value is checked like any other 0-based
    integer, so the largest integer of the width raises OrdinalOverflowError.
    '''
    return cls.from0(value)


def to_array(ordinals, cls=None):
    '''
    1-D numpy array of the 0-based integers of ordinals that are all of one type. The
    type is taken from the first ordinal when it isn't given.
    '''
    ordinals = list(ordinals)
    if cls is None:
        if not ordinals:
            raise ValueError("Can't infer the ordinal type of an empty sequence")
        cls = ordinals[0].__class__
    for o in ordinals:
        if o.__class__ is not cls:
            raise TypeError(f"Expected {cls.__name__} ordinals, got {o.__class__.__name__}")
    return np.array([o.into0() for o in ordinals], dtype=wire_dtype(cls))


def from_array(cls, array):
    '''
    Ordinals of a type from a 1-D array-like of 0-based integers.
    '''
    values = np.asarray(array)
    if values.ndim != 1:
        raise ValueError(f"Expected a 1-D array, got {values.ndim} dimensions")
    if values.size and values.dtype.kind not in 'iuO':
        raise TypeError(f"Expected an integer array, got {values.dtype}")
    logging.debug(f"Decoding {values.size:,d} {cls.__name__} ordinals from a {values.dtype} array.")
    return [cls.from0(v) for v in values.tolist()]
