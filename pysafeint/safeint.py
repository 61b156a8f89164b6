#!/usr/bin/env python
# -*- coding: utf-8 -*-

import collections

import numpy as np

from pysafeint import base
from pysafeint.arith import arithmetic
from pysafeint.cast import cast
from pysafeint.compare import compare, is_equal


class SafeInt:
    '''
    Fixed-width signed or unsigned integers, integers that raise Overflow instead of
    silently under- or over-flowing, truncating or confusing signs. Every conversion
    into the type is range checked, every arithmetic operator is overflow checked,
    and comparisons between different widths and signedness are mathematically
    exact. Abstract class that is sub-typed in this module.
    '''

    # numpy scalars on the left of an operator defer to our reflected dunders
    __array_ufunc__ = None

    def __init__(self, num=0, is_signed=False, num_bits=32):
        '''
        Initialize the class with an integer value of any width and signedness,
        which must be representable in the requested type.
        :param num: Integer value, a plain int, numpy integer scalar or another
        SafeInt. Defaults to zero.
        :param is_signed: Is this object a signed integer, or an unsigned integer
        with twice the range only on the positive side? Defaults to False.
        :param num_bits: Number of bits for this signed or unsigned integer, one of
        8, 16, 32 or 64. Defaults to 32.
        '''
        self.int_type = base.IntType(num_bits, is_signed)
        self.i = cast(num, self.int_type)

    @classmethod
    def of(cls, num):
        '''
        Wrap a numpy integer scalar in the safe integer class of its own type.
        '''
        return safe_class(base.require_int_type(num))(num)

    def _new(self, raw):
        '''
        A result of this object's type around a raw value already of that type.
        '''
        result = object.__new__(self.__class__)
        result.int_type = self.int_type
        result.i = raw
        return result

    def __repr__(self):
        return f"safe{self.int_type}({int(self)})"

    def __str__(self):
        return str(int(self))

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return int(self).__format__(*fmt_args)

    def __int__(self): return int(self.i)
    def __index__(self): return int(self.i)
    def __bool__(self): return bool(self.i != 0)

    def __hash__(self):
        '''
        Hash the mathematical value, so that equal integers of different types hash
        identically, also with equal plain ints and numpy scalars.
        '''
        return hash(int(self))

    @property
    def num_bits(self):
        return self.int_type.num_bits

    @property
    def is_signed(self):
        return self.int_type.is_signed

    @property
    def is_unsigned(self):
        return self.int_type.is_unsigned

    @property
    def signed_type(self):
        return safe_class(self.int_type.signed)

    @property
    def unsigned_type(self):
        return safe_class(self.int_type.unsigned)

    @property
    def limits(self):
        return limits(self.int_type)

    def get(self, to=None):
        '''
        The wrapped numpy scalar, or with to, a checked cast of it to another type.
        '''
        if to is None:
            return self.i
        return cast(self.i, to)

    def assign(self, num):
        '''
        Checked assignment, replacing the wrapped value as a whole. On Overflow the
        current value is kept.
        '''
        self.i = cast(num, self.int_type)
        return self

    def make_signed(self):
        return self.signed_type(self.i)

    def make_unsigned(self):
        return self.unsigned_type(self.i)

    def abs(self):
        return self._new(arithmetic(self.int_type).abs(self.i))

    def pre_increment(self):
        return self.assign(self + 1)

    def post_increment(self):
        prior = +self
        self.pre_increment()
        return prior

    def pre_decrement(self):
        return self.assign(self - 1)

    def post_decrement(self):
        prior = +self
        self.pre_decrement()
        return prior

    def _binary_op(self, op, o):
        '''
        Every arithmetic operator: o is coerced to this object's type, then the
        checked operation of that type is applied.
        '''
        if not base.is_integer(o):
            return NotImplemented
        engine = arithmetic(self.int_type)
        return self._new(getattr(engine, op)(self.i, engine.coerce(o)))

    def _reflected_op(self, op, o):
        '''
        o <op> self, typed as o when o is a numpy scalar, and as self when o is a
        plain int.
        '''
        if not base.is_integer(o):
            return NotImplemented
        if base.int_type(o) is None:
            left = self._new(cast(o, self.int_type))
        else:
            left = SafeInt.of(o)
        return left._binary_op(op, self)

    def __add__(self, o): return self._binary_op('add', o)
    def __sub__(self, o): return self._binary_op('subtract', o)
    def __mul__(self, o): return self._binary_op('multiply', o)
    def __floordiv__(self, o): return self._binary_op('divide', o)
    def __truediv__(self, o): return self._binary_op('truncated_divide', o)
    def __mod__(self, o): return self._binary_op('modulus', o)

    def __radd__(self, o): return self._reflected_op('add', o)
    def __rsub__(self, o): return self._reflected_op('subtract', o)
    def __rmul__(self, o): return self._reflected_op('multiply', o)
    def __rfloordiv__(self, o): return self._reflected_op('divide', o)
    def __rtruediv__(self, o): return self._reflected_op('truncated_divide', o)
    def __rmod__(self, o): return self._reflected_op('modulus', o)

    def __divmod__(self, o):
        if not base.is_integer(o):
            return NotImplemented
        return self // o, self % o

    def __rdivmod__(self, o):
        if not base.is_integer(o):
            return NotImplemented
        return self.__rfloordiv__(o), self.__rmod__(o)

    def __neg__(self):
        return self._new(arithmetic(self.int_type).negate(self.i))

    def __pos__(self):
        return self._new(self.i)

    def __abs__(self):
        return self.abs()

    '''
    Comparison dunders never overflow: operands of different types are compared by
    mathematical value, without casting one into the other's type.
    '''
    def __eq__(self, o): return is_equal(self, o) if base.is_integer(o) else NotImplemented
    def __ne__(self, o): return not is_equal(self, o) if base.is_integer(o) else NotImplemented
    def __lt__(self, o): return compare(self, o) < 0 if base.is_integer(o) else NotImplemented
    def __le__(self, o): return compare(self, o) <= 0 if base.is_integer(o) else NotImplemented
    def __gt__(self, o): return compare(self, o) > 0 if base.is_integer(o) else NotImplemented
    def __ge__(self, o): return compare(self, o) >= 0 if base.is_integer(o) else NotImplemented


class ISafe(SafeInt):
    """
    Fixed-width signed integers, an integer that raises Overflow instead of wrapping
    around according to a particular number of bits.
    """

    def __init__(self, num=0, num_bits=32):
        super().__init__(num, is_signed=True, num_bits=num_bits)


class USafe(SafeInt):
    """
    Fixed-width unsigned integers, an integer that raises Overflow instead of
    wrapping around according to a particular number of bits.
    """

    def __init__(self, num=0, num_bits=32):
        super().__init__(num, is_signed=False, num_bits=num_bits)


class ISafe8(ISafe):
    int_type = base.IntType(8, True)

    def __init__(self, num=0):
        super().__init__(num, num_bits=8)


class ISafe16(ISafe):
    int_type = base.IntType(16, True)

    def __init__(self, num=0):
        super().__init__(num, num_bits=16)


class ISafe32(ISafe):
    int_type = base.IntType(32, True)

    def __init__(self, num=0):
        super().__init__(num, num_bits=32)


class ISafe64(ISafe):
    int_type = base.IntType(64, True)

    def __init__(self, num=0):
        super().__init__(num, num_bits=64)


class USafe8(USafe):
    int_type = base.IntType(8, False)

    def __init__(self, num=0):
        super().__init__(num, num_bits=8)


class USafe16(USafe):
    int_type = base.IntType(16, False)

    def __init__(self, num=0):
        super().__init__(num, num_bits=16)


class USafe32(USafe):
    int_type = base.IntType(32, False)

    def __init__(self, num=0):
        super().__init__(num, num_bits=32)


class USafe64(USafe):
    int_type = base.IntType(64, False)

    def __init__(self, num=0):
        super().__init__(num, num_bits=64)


_SAFE_CLASSES = {
    cls.int_type: cls
    for cls in (ISafe8, ISafe16, ISafe32, ISafe64, USafe8, USafe16, USafe32, USafe64)
}

# platform size types, as numpy.uintp and numpy.intp
SizeType = _SAFE_CLASSES[base.IntType.from_dtype(np.uintp)]
SSizeType = _SAFE_CLASSES[base.IntType.from_dtype(np.intp)]


def safe_class(t):
    '''
    The fixed-width safe integer class for an integer type.
    '''
    return _SAFE_CLASSES[base.require_int_type(t)]


NumericLimits = collections.namedtuple('NumericLimits', [
    'min', 'max', 'lowest', 'digits', 'digits10', 'radix',
    'is_signed', 'is_integer', 'is_exact', 'is_bounded', 'is_modulo',
])


def limits(t):
    '''
    Numeric limits of a safe integer type, its bounds given as safe integers. Safe
    integers never wrap around, so unlike their native type they are not modulo.
    '''
    int_type = base.require_int_type(t)
    cls = safe_class(int_type)
    digits = int_type.num_bits - int(int_type.is_signed)
    return NumericLimits(
        min=cls(int_type.min),
        max=cls(int_type.max),
        lowest=cls(int_type.min),
        digits=digits,
        digits10=int(np.floor(digits * np.log10(2))),
        radix=2,
        is_signed=int_type.is_signed,
        is_integer=True,
        is_exact=True,
        is_bounded=True,
        is_modulo=False,
    )
