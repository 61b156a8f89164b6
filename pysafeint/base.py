#!/usr/bin/env python
# -*- coding: utf-8 -*-

import collections
import logging
import numbers

import numpy as np

'''
Stateless types and functions that are used throughout the conversion, arithmetic
and comparison modules: the Overflow error, the fixed-width integer type
descriptor and the type-level queries over it.
'''

NUM_BITS = (8, 16, 32, 64)


class Overflow(OverflowError):
    '''
    The single error kind of this package. Raised whenever a conversion or an
    arithmetic result cannot be represented exactly in the destination integer
    type, on division or modulus by zero, and on negating the signed minimum.
    '''


def raise_overflow(msg):
    '''
    Log and raise an Overflow for the operation described by msg.
    '''
    logging.debug(f"Integer overflow: {msg}")
    raise Overflow(f"Integer value out of range: {msg}")


class IntType(collections.namedtuple('IntType', ['num_bits', 'is_signed'])):
    '''
    Descriptor of a native fixed-width integer type, characterized by its width
    in bits and its signedness. Two descriptors are interchangeable only when
    both attributes match.
    '''
    __slots__ = ()

    def __new__(cls, num_bits, is_signed):
        '''
        :param num_bits: Width in bits, one of the widths numpy provides natively.
        :param is_signed: Does the type's range include negative values?
        '''
        if num_bits not in NUM_BITS:
            raise ValueError(f"Unsupported integer width {num_bits}, expected one of {NUM_BITS}")
        return super().__new__(cls, int(num_bits), bool(is_signed))

    @classmethod
    def from_dtype(cls, dtype):
        dtype = np.dtype(dtype)
        if dtype.kind not in 'iu':
            raise TypeError(f"Not an integer dtype: {dtype}")
        return cls(dtype.itemsize * 8, dtype.kind == 'i')

    def __str__(self):
        return f"{'' if self.is_signed else 'u'}int{self.num_bits}"

    @property
    def is_unsigned(self):
        return not self.is_signed

    @property
    def dtype(self):
        return np.dtype(f"{'i' if self.is_signed else 'u'}{self.num_bits // 8}")

    @property
    def type(self):
        '''
        The numpy scalar class of this type, e.g. numpy.int8.
        '''
        return self.dtype.type

    @property
    def min(self):
        return self.type(np.iinfo(self.dtype).min)

    @property
    def max(self):
        return self.type(np.iinfo(self.dtype).max)

    @property
    def signed(self):
        return IntType(self.num_bits, True)

    @property
    def unsigned(self):
        return IntType(self.num_bits, False)


def is_integer(obj):
    '''
    Can obj take part in checked conversion, arithmetic and comparison? True for
    plain Python ints, numpy integer scalars and wrapped safe integers.
    '''
    if isinstance(obj, (np.integer, numbers.Integral)):
        return True
    return isinstance(getattr(obj, 'int_type', None), IntType) and hasattr(obj, 'i')


def int_type(obj):
    '''
    Resolve the integer type descriptor of a value or a type. Accepts IntType
    descriptors, numpy integer scalars, scalar classes and dtypes, and safe
    integer instances or fixed-width classes. Plain Python ints have no fixed
    width, so None is returned for them.
    '''
    if isinstance(obj, IntType):
        return obj
    desc = getattr(obj, 'int_type', None)
    if isinstance(desc, IntType):
        return desc
    if isinstance(obj, np.integer):
        return IntType.from_dtype(obj.dtype)
    if isinstance(obj, np.dtype) or (isinstance(obj, type) and issubclass(obj, np.integer)):
        return IntType.from_dtype(obj)
    if isinstance(obj, numbers.Integral):
        return None
    raise TypeError(f"Not an integer value or type: {obj!r}")


def require_int_type(obj):
    '''
    Like int_type(), but for places where a fixed width is mandatory.
    '''
    desc = int_type(obj)
    if desc is None:
        raise TypeError(f"Plain int {obj!r} has no fixed width")
    return desc


def unwrap(value):
    '''
    Split an integer value into (type descriptor, raw value). The raw value is a
    numpy scalar of the descriptor's type, or a plain int when the descriptor is
    None.
    '''
    if isinstance(value, type) or not is_integer(value):
        raise TypeError(f"Not an integer value: {value!r}")
    if isinstance(value, np.integer):
        return IntType.from_dtype(value.dtype), value
    if isinstance(value, numbers.Integral):
        return None, int(value)
    return value.int_type, value.i


def is_signed(t):
    return require_int_type(t).is_signed


def is_unsigned(t):
    return require_int_type(t).is_unsigned


def signed_type(t):
    '''
    Signed counterpart, of equal width, of an integer type.
    '''
    return require_int_type(t).signed


def unsigned_type(t):
    '''
    Unsigned counterpart, of equal width, of an integer type.
    '''
    return require_int_type(t).unsigned
