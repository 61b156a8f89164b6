#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pysafeint.base import IntType, unwrap

'''
Mathematically exact equality and ordering between integers of any width and
signedness. Neither operand is cast to the other's type, so a comparison can
never raise Overflow.
'''


def _three_way(a, b):
    return 1 if a > b else (0 if a == b else -1)


def _common_unsigned(a, a_type, b, b_type):
    '''
    Reinterpret two non-negative values as the unsigned type wide enough for both.
    '''
    common = IntType(max(a_type.num_bits, b_type.num_bits), False)
    return a.astype(common.dtype), b.astype(common.dtype)


def is_equal(a, b):
    '''
    Do a and b hold the same mathematical value?
    :param a: numpy integer scalar, plain int or safe integer
    :param b: numpy integer scalar, plain int or safe integer
    '''
    a_type, a_raw = unwrap(a)
    b_type, b_raw = unwrap(b)
    # a plain int has unlimited precision
    if a_type is None or b_type is None:
        return int(a_raw) == int(b_raw)
    if a_type.is_signed == b_type.is_signed:
        return bool(a_raw == b_raw)
    if a_raw < 0 or b_raw < 0:
        return False
    a_raw, b_raw = _common_unsigned(a_raw, a_type, b_raw, b_type)
    return bool(a_raw == b_raw)


def compare(a, b):
    '''
    Three-way comparison of a and b: -1 if a is less, 0 if equal, 1 if greater.
    '''
    a_type, a_raw = unwrap(a)
    b_type, b_raw = unwrap(b)
    if a_type is None or b_type is None:
        return _three_way(int(a_raw), int(b_raw))
    if a_type.is_signed == b_type.is_signed:
        return _three_way(a_raw, b_raw)
    if a_raw < 0:
        return -1
    if b_raw < 0:
        return 1
    return _three_way(*_common_unsigned(a_raw, a_type, b_raw, b_type))
