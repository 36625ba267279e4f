#!/usr/bin/env python
# -*- coding: utf-8 -*-

'''
Stateless functions that are used by the ordinal number classes of every width.
'''

ORDINAL_WORDS = {
    1: 'first',
    2: 'second',
    3: 'third',
}


def ordinal_suffix(num):
    '''
    English suffix for a 1-based ordinal numeral. Picked by the last two digits, so
    that 11, 12 & 13 all take "th" but 21, 22 & 23 do not.
    '''
    two_digits = int(num) % 100
    digit = two_digits % 10
    if digit == 1 and two_digits != 11:
        return 'st'
    elif digit == 2 and two_digits != 12:
        return 'nd'
    elif digit == 3 and two_digits != 13:
        return 'rd'
    return 'th'


def format_ordinal(num):
    '''
    Human readable form of a 1-based ordinal number, spelled out for the first three
    and a numeral with a suffix after that, e.g. "second" or "4th".
    '''
    num = int(num)
    if num in ORDINAL_WORDS:
        return ORDINAL_WORDS[num]
    return f"{num}{ordinal_suffix(num)}"
