"""This module supports single elements of binary fields carrying their own modulus.

A FieldElement pairs a reduced polynomial with the irreducible polynomial it is
reduced by. Use FieldElement instead of gf2m.field.Field when the modulus is not
known in advance, for instance in functions accepting elements of any binary field.

Operators +, -, *, /, and ** are overloaded. Combining elements with different
moduli raises CrossDomainError. Elements are immutable.
"""

from gf2m import gf2x
from gf2m.primes import field_order


class CrossDomainError(TypeError):
    """Elements of different fields were combined."""


def new_field_element(value, modulus):
    """Return element of the field generated by modulus, reducing value."""
    return FieldElement(value, modulus)


def generate_field_element(exponent, modulus):
    """Return generator x raised to the given power in the field generated by modulus."""
    return FieldElement.generate(exponent, modulus)


class FieldElement:
    """Element of the binary field generated by an irreducible polynomial.

    Invariant: attribute 'value' is reduced modulo attribute 'modulus'.
    """

    __slots__ = ('_value', '_modulus')

    def __init__(self, value, modulus):
        modulus = int(modulus)
        value = int(value)
        if modulus < 2:
            raise ValueError('modulus must have positive degree')

        if value < 0:
            raise ValueError('polynomial must be nonnegative')

        object.__setattr__(self, '_value', gf2x._mod(value, modulus))
        object.__setattr__(self, '_modulus', modulus)

    @classmethod
    def generate(cls, exponent, modulus):
        """Return generator x raised to the given power modulo the given modulus.

        The exponent is reduced modulo the order of the multiplicative group.
        """
        modulus = int(modulus)
        if modulus < 2:
            raise ValueError('modulus must have positive degree')

        exponent = int(exponent) % field_order(modulus)
        return cls(gf2x._powmod(gf2x.GENERATOR, exponent, modulus), modulus)

    def __setattr__(self, name, value):
        raise AttributeError('field elements are immutable')

    def __reduce__(self):
        return type(self), (self._value, self._modulus)

    @property
    def value(self):
        """Reduced polynomial representing this element."""
        return self._value

    @property
    def modulus(self):
        """Irreducible polynomial of the field containing this element."""
        return self._modulus

    def __int__(self):
        """Extract polynomial field element as an integer."""
        return self._value

    def _coerce(self, other):
        if isinstance(other, FieldElement):
            if other._modulus != self._modulus:
                raise CrossDomainError(f'cannot combine elements modulo {gf2x.to_terms(self._modulus)}'
                                       f' and modulo {gf2x.to_terms(other._modulus)}')

            return other

        if isinstance(other, int):
            return type(self)(other, self._modulus)

        raise TypeError('field element or int expected')

    def is_zero(self):
        """Test for the additive identity 0."""
        return self._value == gf2x.ADD_IDENTITY

    def is_one(self):
        """Test for the multiplicative identity 1."""
        return self._value == gf2x.MULT_IDENTITY

    def equal(self, other):
        """Test equality with element of the same field."""
        if not isinstance(other, FieldElement):
            raise TypeError('field element expected')

        return self._coerce(other)._value == self._value

    def add(self, other):
        """Sum of this element and other, which is the same as their difference."""
        other = self._coerce(other)
        return type(self)(self._value ^ other._value, self._modulus)

    def mul(self, other):
        """Product of this element and other."""
        other = self._coerce(other)
        if other.is_one():
            return self

        if self.is_one():
            return other

        return type(self)(gf2x._mul(self._value, other._value), self._modulus)

    def mult_inverse(self):
        """Multiplicative inverse of this element, if nonzero."""
        if self.is_zero():
            raise ZeroDivisionError('inverse of zero field element does not exist')

        return type(self)(gf2x._invert(self._value, self._modulus), self._modulus)

    def div(self, other):
        """Quotient of this element and nonzero element other."""
        other = self._coerce(other)
        return self.mul(other.mult_inverse())

    def exp(self, exponent):
        """Raise this element to the given power.

        The result is 1 for exponent 0, including for the zero element.
        Otherwise the exponent is reduced modulo the order of the multiplicative group.
        """
        exponent = int(exponent)
        if exponent == 0:
            return type(self)(gf2x.MULT_IDENTITY, self._modulus)

        if self.is_zero():
            if exponent < 0:
                raise ZeroDivisionError('inverse of zero field element does not exist')

            return self

        exponent %= field_order(self._modulus)
        return type(self)(gf2x._powmod(self._value, exponent, self._modulus), self._modulus)

    def __add__(self, other):
        """Addition."""
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented

        return self.add(other)

    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __neg__(self):
        """Negation."""
        return self

    def __mul__(self, other):
        """Multiplication."""
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented

        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Division."""
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented

        return self.div(other)

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(other, self._modulus).div(self)

    def __pow__(self, exponent):
        """Exponentiation."""
        if not isinstance(exponent, int):
            return NotImplemented

        return self.exp(exponent)

    def __eq__(self, other):
        """Equality test.

        Raises CrossDomainError for elements of different fields.
        """
        if isinstance(other, FieldElement):
            return self.equal(other)

        if isinstance(other, int):
            return self._value == other

        return NotImplemented

    def __hash__(self):
        """Hash value."""
        return hash((type(self), self._value, self._modulus))

    def __bool__(self):
        """Truth value testing.

        Return False if this field element is zero, True otherwise.
        """
        return bool(self._value)

    def __str__(self):
        return f'{gf2x.to_terms(self._value)} mod {gf2x.to_terms(self._modulus)}'

    def __repr__(self):
        return f'FieldElement({self._value:#x}, {self._modulus:#x})'
