"""This module supports binary fields GF(2^d) with a fixed modulus.

A Field binds one irreducible modulus to an output width of 8, 16, 32 or 64 bits.
Field elements are passed in and returned as unsigned integers of that width
(NumPy scalars of type uint8, uint16, uint32, or uint64); internally all
arithmetic is done on polynomials of at most 64 bits using module gf2x.

For example, GF(256) with the modulus x^8 + x^4 + x^3 + x^2 + 1 is obtained by:

    F = Field(primes.PRIMES[8], 8)
    F.mul(0xBC, 0xDE)  # 0x6D
    F.div(0x6D, 0xBC)  # 0xDE

Field instances are immutable, so a single field can be shared freely.
"""

import logging
import numpy as np
from gf2m import gf2x
from gf2m.primes import field_order

WIDTHS = (8, 16, 32, 64)
MAX_TABLE_DEGREE = 24


class ConstructionError(ValueError):
    """Field elements do not fit in the requested width."""


class Field:
    """Finite field of polynomials modulo an irreducible polynomial.

    The modulus is trusted to be irreducible and is not checked.
    """

    __slots__ = ('_modulus', '_width', '_dtype', '_order')

    def __init__(self, modulus, width=64):
        modulus = int(modulus)
        if width not in WIDTHS:
            raise ValueError(f'width must be one of {WIDTHS}, not {width}')

        if modulus < 2:
            raise ConstructionError('modulus must have positive degree')

        if field_order(modulus) > (1 << width) - 1:
            raise ConstructionError(f'cannot use {width}-bit integers to represent '
                                    f'elements of GF(2^{gf2x.degree(modulus)})')

        object.__setattr__(self, '_modulus', modulus)
        object.__setattr__(self, '_width', width)
        object.__setattr__(self, '_dtype', np.dtype(f'uint{width}'))
        object.__setattr__(self, '_order', 1 << gf2x.degree(modulus))
        logging.debug(f'Field GF(2^{gf2x.degree(modulus)}) modulo {gf2x.to_terms(modulus)} '
                      f'using uint{width}')

    def __setattr__(self, name, value):
        raise AttributeError('fields are immutable')

    def __reduce__(self):
        return type(self), (self._modulus, self._width)

    @property
    def modulus(self):
        """Irreducible polynomial generating the field."""
        return self._modulus

    @property
    def width(self):
        """Bit width of the returned field elements."""
        return self._width

    @property
    def dtype(self):
        """NumPy dtype of the returned field elements."""
        return self._dtype

    def _narrow(self, a):
        return self._dtype.type(a)

    def order(self):
        """Number of elements of the field, including zero."""
        return self._order

    def generate(self, exponent):
        """Return generator x raised to the given power.

        The exponent is reduced modulo the order of the multiplicative group,
        so generate(0), ..., generate(order()-2) are all distinct nonzero elements.
        """
        exponent = int(exponent) % (self._order - 1)
        return self._narrow(gf2x._powmod(gf2x.GENERATOR, exponent, self._modulus))

    def powers(self):
        """Return array with all powers of generator x, for exponents 0..order()-2.

        Entry i of the array holds generate(i): the antilogarithm table of the field.
        The table has order()-1 entries, so it is only built for fields of degree
        up to MAX_TABLE_DEGREE.
        """
        if gf2x.degree(self._modulus) > MAX_TABLE_DEGREE:
            raise ValueError(f'table of powers too large for {self}, '
                             f'degree at most {MAX_TABLE_DEGREE} supported')

        n = self._order - 1
        table = np.empty(n, dtype=self._dtype)
        modulus = self._modulus
        a = gf2x.MULT_IDENTITY
        for i in range(n):
            table[i] = a
            a <<= 1
            if a & self._order:
                a ^= modulus
        return table

    def add(self, *values):
        """Sum of the given field elements, 0 if no elements are given.

        Addition and subtraction coincide in binary fields.
        """
        s = 0
        for a in values:
            s ^= int(a)
        return self._narrow(s)

    sub = add

    def mul(self, *values):
        """Product of the given field elements.

        Returns 0 if no elements are given, or if any of the elements is 0.
        """
        values = [int(a) for a in values]
        if not values or 0 in values:
            return self._narrow(0)

        modulus = self._modulus
        p = values[0]
        for a in values[1:]:
            p = gf2x._mod(gf2x._mul(p, a), modulus)
        return self._narrow(p)

    def mult_inverse(self, y):
        """Multiplicative inverse of nonzero field element y."""
        y = gf2x._mod(int(y), self._modulus)
        if y == 0:
            raise ZeroDivisionError('division by zero field element')

        return self._narrow(self._reciprocal(y))

    def _reciprocal(self, y):
        return gf2x._mod(gf2x._invert(y, self._modulus), self._modulus)

    def div(self, numerator, denominator):
        """Divide numerator by nonzero denominator."""
        denominator = gf2x._mod(int(denominator), self._modulus)
        if denominator == 0:
            raise ZeroDivisionError('division by zero field element')

        p = gf2x._mul(gf2x._mod(int(numerator), self._modulus), self._reciprocal(denominator))
        return self._narrow(gf2x._mod(p, self._modulus))

    def exp(self, base, exponent):
        """Raise field element base to the given power.

        The result is 1 for exponent 0, including for base 0. Otherwise the
        exponent is reduced modulo the order of the multiplicative group.
        Negative exponents are supported for nonzero base.
        """
        exponent = int(exponent)
        if exponent == 0:
            return self._narrow(gf2x.MULT_IDENTITY)

        base = gf2x._mod(int(base), self._modulus)
        if base == 0:
            if exponent < 0:
                raise ZeroDivisionError('division by zero field element')

            return self._narrow(0)

        exponent %= self._order - 1
        return self._narrow(gf2x._powmod(base, exponent, self._modulus))

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented

        return self._modulus == other._modulus and self._width == other._width

    def __hash__(self):
        return hash((type(self), self._modulus, self._width))

    def __repr__(self):
        return f'Field({self._modulus:#x}, {self._width})'

    def __str__(self):
        return f'GF(2^{gf2x.degree(self._modulus)})'
