#!/usr/bin/env python
# -*- coding: utf-8 -*-

import enum
import functools

from pysafeint.base import raise_overflow, require_int_type
from pysafeint.cast import cast


class Sign(enum.Enum):
    NEGATIVE = -1
    NEITHER = 0
    POSITIVE = 1


def get_sign(i):
    return Sign.NEGATIVE if i < 0 else (Sign.POSITIVE if i > 0 else Sign.NEITHER)


class Arithmetic:
    '''
    Overflow-checked arithmetic over a single fixed-width integer type. Operands
    are numpy scalars of that type; every check is done with identities that
    never overflow themselves, since numpy scalars silently wrap around. Abstract
    class that is sub-typed in this module by signedness.
    '''

    def __init__(self, int_type):
        self.int_type = int_type
        self.min, self.max = int_type.min, int_type.max

    def __repr__(self):
        return f"{self.__class__.__name__}({self.int_type})"

    def coerce(self, value):
        '''
        Bring a second operand of any integer type into this type. A failing
        conversion is the same Overflow as a failing operation.
        '''
        return cast(value, self.int_type)

    def divide(self, a, b):
        self.division_check(a, b)
        return a // b

    def truncated_divide(self, a, b):
        '''
        Division rounding toward zero, as native machine division does, rather than
        toward negative infinity as divide does.
        '''
        quotient = self.divide(a, b)
        # a floored negative quotient is one below the truncated one
        if (a < 0) != (b < 0) and a % b != 0:
            quotient += 1
        return quotient

    def modulus(self, a, b):
        self.division_check(a, b)
        return a % b


class UnsignedArithmetic(Arithmetic):

    def division_check(self, a, b):
        if b == 0:
            raise_overflow(f"{self.int_type} {a} divided by zero")

    def add(self, a, b):
        if a == 0:
            return b
        if b == 0:
            return a
        if (self.max - a) < b:
            raise_overflow(f"{self.int_type} {a} + {b}")
        return a + b

    def subtract(self, a, b):
        if b > a:
            raise_overflow(f"{self.int_type} {a} - {b}")
        return a - b

    def multiply(self, a, b):
        if a == 0 or b == 0:
            return self.int_type.type(0)
        if a == 1:
            return b
        if b == 1:
            return a
        if (self.max // a) < b:
            raise_overflow(f"{self.int_type} {a} * {b}")
        return a * b

    def abs(self, a):
        return a

    def negate(self, a):
        if a != 0:
            raise_overflow(f"{self.int_type} -{a}")
        return a


class SignedArithmetic(Arithmetic):

    def division_check(self, a, b):
        if b == 0:
            raise_overflow(f"{self.int_type} {a} divided by zero")
        # -min has no positive counterpart
        if b == -1 and a == self.min:
            raise_overflow(f"{self.int_type} {a} divided by {b}")

    def add(self, a, b):
        if a == 0:
            return b
        if b == 0:
            return a
        sign_a, sign_b = get_sign(a), get_sign(b)
        if sign_a != sign_b:
            return a + b
        if sign_a is Sign.POSITIVE:
            if (self.max - a) < b:
                raise_overflow(f"{self.int_type} {a} + {b}")
        elif (self.min - a) > b:
            raise_overflow(f"{self.int_type} {a} + {b}")
        return a + b

    def subtract(self, a, b):
        if b == 0:
            return a
        sign_a, sign_b = get_sign(a), get_sign(b)
        if sign_a == sign_b:
            return a - b
        if sign_b is Sign.NEGATIVE:
            if (self.max + b) < a:
                raise_overflow(f"{self.int_type} {a} - {b}")
        elif (self.min - a) > -b:
            raise_overflow(f"{self.int_type} {a} - {b}")
        return a - b

    def abs(self, a):
        if a >= 0:
            return a
        if a == self.min:
            raise_overflow(f"{self.int_type} abs({a})")
        return -a

    def multiply(self, a, b):
        if a == 0 or b == 0:
            return self.int_type.type(0)
        if a == 1:
            return b
        if b == 1:
            return a
        if a == self.min or b == self.min or (self.max // self.abs(a)) < self.abs(b):
            raise_overflow(f"{self.int_type} {a} * {b}")
        return a * b

    def negate(self, a):
        return self.multiply(a, self.int_type.type(-1))


@functools.lru_cache(maxsize=None)
def _arithmetic(int_type):
    if int_type.is_signed:
        return SignedArithmetic(int_type)
    return UnsignedArithmetic(int_type)


def arithmetic(t):
    '''
    The checked arithmetic engine for an integer type.
    :param t: IntType, numpy integer type or dtype, or fixed-width safe integer class
    '''
    return _arithmetic(require_int_type(t))
