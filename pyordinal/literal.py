#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import re

from pyordinal.ordinal import ORDINAL_TYPES, Osize, ordinal1


class OrdinalSyntaxError(ValueError):
    '''
    Text that is not an ordinal literal.
    '''


WORD_VALUES = {
    'first': 1,
    'second': 2,
    'third': 3,
}

# "4-th", "4 th", "4th" or "4.", then an optional type name
NUMBER_PATTERN = re.compile(
    r'^\s*(?P<num>\d+(?:_\d+)*)\s*(?:-\s*[A-Za-z_]\w*|[A-Za-z_]\w*|\.)(?:\s+(?P<type>[A-Za-z_]\w*))?\s*$'
)
# a spelled out ordinal, then an optional type name
WORD_PATTERN = re.compile(r'^\s*(?P<word>[A-Za-z_]\w*)(?:\s+(?P<type>[A-Za-z_]\w*))?\s*$')


def _literal_type(type_name, cls):
    if type_name is None:
        return cls or Osize
    try:
        named_cls = ORDINAL_TYPES[type_name]
    except KeyError:
        raise OrdinalSyntaxError(f"'{type_name}' is not an ordinal type, expected one of {', '.join(ORDINAL_TYPES)}") from None
    if cls is not None and cls is not named_cls:
        raise OrdinalSyntaxError(f"literal is typed {type_name} but {cls.__name__} was requested")
    return named_cls


def ordinal(text, cls=None):
    '''
    Parse a short-hand, 1-based ordinal literal. Examples:

        ordinal('first'), ordinal('second'), ordinal('third')
        ordinal('4-th'), ordinal('4 th'), ordinal('4th'), ordinal('4.')
        ordinal('5-th O32')

    Only "first", "second" & "third" can be written as a word. The suffix after a
    number is not checked, so '4-st' is the 4th ordinal too. A trailing type name
    picks the width, otherwise `cls` does, otherwise it is an Osize.
    '''
    match = NUMBER_PATTERN.match(text)
    if match is not None:
        num = int(match.group('num'))
    else:
        match = WORD_PATTERN.match(text)
        if match is None:
            raise OrdinalSyntaxError(f"'{text}' is not an ordinal literal")
        word = match.group('word')
        if word not in WORD_VALUES:
            raise OrdinalSyntaxError(f"'{word}' can't be written as a word, only {', '.join(WORD_VALUES)} can")
        num = WORD_VALUES[word]

    cls = _literal_type(match.group('type'), cls)
    logging.debug(f"Parsed ordinal literal '{text}' as {cls.__name__} w/ 1-based value {num}.")
    return ordinal1(num, cls=cls)
