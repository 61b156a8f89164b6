#!/usr/bin/env python
# -*- coding: utf-8 -*-

import enum
import functools

from pysafeint.base import raise_overflow, require_int_type, unwrap


class Conversion(enum.Enum):
    '''
    How a value of one integer type is checked on its way into another.
    '''
    WIDEN = 'widen'                             # every source value fits, no check
    SIGNED_NARROW = 'signed-narrow'             # check both bounds of the destination
    UNSIGNED_NARROW = 'unsigned-narrow'         # check the destination's max
    SIGNED_TO_UNSIGNED = 'signed-to-unsigned'   # reject negatives, then as unsigned
    UNSIGNED_TO_SIGNED = 'unsigned-to-signed'   # check the destination's max


@functools.lru_cache(maxsize=None)
def classify(from_type, to_type):
    '''
    Decide, once per pair of types, which check a conversion between them needs.
    :param from_type: IntType of the source
    :param to_type: IntType of the destination
    '''
    if from_type.is_signed == to_type.is_signed and to_type.num_bits >= from_type.num_bits:
        return Conversion.WIDEN
    if from_type.is_unsigned and to_type.is_signed and to_type.num_bits > from_type.num_bits:
        return Conversion.WIDEN
    if from_type.is_signed and to_type.is_signed:
        return Conversion.SIGNED_NARROW
    if from_type.is_unsigned and to_type.is_unsigned:
        return Conversion.UNSIGNED_NARROW
    if from_type.is_signed:
        return Conversion.SIGNED_TO_UNSIGNED
    return Conversion.UNSIGNED_TO_SIGNED


def is_lossless(from_type, to_type):
    '''
    Can every value of from_type be represented in to_type?
    '''
    return classify(require_int_type(from_type), require_int_type(to_type)) is Conversion.WIDEN


def _in_range(raw, from_type, to_type):
    conversion = classify(from_type, to_type)
    if conversion is Conversion.WIDEN:
        return True
    if conversion is Conversion.SIGNED_TO_UNSIGNED:
        if raw < 0:
            return False
        unsigned = from_type.unsigned
        return _in_range(raw.astype(unsigned.dtype), unsigned, to_type)
    # destination bounds fit in the source type in all remaining cases
    if raw > from_type.type(to_type.max):
        return False
    if conversion is Conversion.SIGNED_NARROW:
        return bool(raw >= from_type.type(to_type.min))
    return True


def in_range(value, to):
    '''
    Is value representable in the integer type to?
    :param value: numpy integer scalar, plain int or safe integer
    :param to: IntType, numpy integer type or dtype, or fixed-width safe integer class
    '''
    to_type = require_int_type(to)
    from_type, raw = unwrap(value)
    if from_type is None:
        return int(to_type.min) <= raw <= int(to_type.max)
    return _in_range(raw, from_type, to_type)


def cast(value, to):
    '''
    Checked conversion of value to the integer type to, returned as a numpy scalar
    of that type with the same mathematical value. Raises Overflow when the value
    is out of the destination's range.
    '''
    to_type = require_int_type(to)
    from_type, raw = unwrap(value)
    if from_type is None:
        if not int(to_type.min) <= raw <= int(to_type.max):
            raise_overflow(f"{raw} does not fit in {to_type}")
        return to_type.type(raw)
    if from_type == to_type:
        return raw
    if not _in_range(raw, from_type, to_type):
        raise_overflow(f"{from_type} {raw} does not fit in {to_type}")
    return raw.astype(to_type.dtype)
