"""This module supports arithmetic with polynomials over GF(2).

Polynomials over GF(2) are represented as nonnegative integers of at most 64 bits.
The polynomial b_n x^n + ... + b_1 x + b_0 corresponds
to the integer b_n 2^n + ... + b_1 2 + b_0, for bits b_n,...,b_0.

The module functions operate on plain integers (and accept Polynomial
instances as well). Class Polynomial wraps an integer as an immutable value
with the operators +, -, *, //, %, ** and function divmod overloaded.

Products must fit in a 64-bit register: multiplying polynomials whose degrees
add up to more than 63 raises an OverflowError. By convention the degree of
the zero polynomial is 0 (not -1), which the division loop relies on.
"""

ADD_IDENTITY = 0   # zero polynomial
MULT_IDENTITY = 1  # x^0
GENERATOR = 2      # x, primitive for all moduli in gf2m.primes

_MAX_DEGREE = 63


class InvariantViolation(ArithmeticError):
    """Extended Euclidean algorithm ended without a unit remainder.

    Raised only if a modulus is not irreducible (or shares a factor with the
    element being inverted), which breaks the assumptions of any field built on it.
    """


def _value(a):
    if isinstance(a, Polynomial):
        return a.value
    return a


def add(a, b):
    """Add polynomials a and b, which is the same as subtracting them."""
    return Polynomial(_value(a) ^ _value(b))


def mul(a, b):
    """Multiply polynomials a and b."""
    return Polynomial(_mul(_value(a), _value(b)))


def _mul(a, b):
    if (a.bit_length() - 1) + (b.bit_length() - 1) > _MAX_DEGREE:
        raise OverflowError('cannot multiply polynomials with combined degree greater than 63')

    # a lone power of x multiplies by shifting
    if a & (a - 1) == 0 and a:
        return b << (a.bit_length() - 1)

    if b & (b - 1) == 0 and b:
        return a << (b.bit_length() - 1)

    c = 0
    i = 0
    while a:
        if a & 1:
            c ^= b << i
        a >>= 1
        i += 1
    return c


def mod(a, b):
    """Reduce polynomial a modulo polynomial b, for nonzero b."""
    return Polynomial(_divmod(_value(a), _value(b))[1])


def _mod(a, b):
    return _divmod(a, b)[1]


def divmod_(a, b):
    """Divide polynomial a by polynomial b with remainder, for nonzero b."""
    q, r = _divmod(_value(a), _value(b))
    return Polynomial(q), Polynomial(r)


def _divmod(a, b):
    if b == 0:
        raise ZeroDivisionError('division by zero polynomial')

    n = _degree(b)
    q = 0
    while a:
        k = _degree(a) - n
        if k < 0:
            break

        q ^= 1 << k
        a ^= b << k
    return q, a


def degree(a):
    """Degree of polynomial a (0 if a is zero)."""
    return _degree(_value(a))


def _degree(a):
    if a == 0:
        return 0

    return a.bit_length() - 1


def gcd(a, b):
    """Greatest common divisor of polynomials a and b."""
    return Polynomial(_gcd(_value(a), _value(b)))


def _gcd(a, b):
    while b:
        a, b = b, _mod(a, b)
    return a


def invert(a, b):
    """Inverse of polynomial a modulo polynomial b, for nonzero a and b.

    Computed with the extended Euclidean algorithm, keeping track of the
    coefficient of a only. Raises InvariantViolation if no unit remainder is
    reached, which cannot happen if b is irreducible and a is not a multiple of b.
    """
    return Polynomial(_invert(_value(a), _value(b)))


def _invert(a, b):
    if b == 0:
        raise ZeroDivisionError('division by zero polynomial')

    if a == 0:
        raise ZeroDivisionError('inverse of zero polynomial does not exist')

    r, r1 = b, a
    t, t1 = 0, 1
    while r1:
        q, r2 = _divmod(r, r1)
        r, r1 = r1, r2
        t, t1 = t1, t ^ _mul(q, t1)
    if _degree(r) > 0:
        raise InvariantViolation(f'failed to invert {_to_terms(a)} modulo {_to_terms(b)}')

    return t


def powmod(a, n, b=0):
    """Raise polynomial a to the power of n modulo polynomial b.

    Zero modulus b means no reduction. For n=0 the result is 1, even for a=0.
    Negative n requires nonzero b and inverts a modulo b first.
    """
    return Polynomial(_powmod(_value(a), int(n), _value(b)))


def _powmod(a, n, b=0):
    if n == 0:
        return 1

    if n < 0:
        if b == 0:
            raise ValueError('negative exponent')

        a = _invert(a, b)
        n = -n
    elif b:
        a = _mod(a, b)
    d = a
    c = 1
    for i in range(n.bit_length() - 1):
        # d = a ** (1 << i) holds
        if n & (1 << i):
            c = _mul(c, d)
            if b:
                c = _mod(c, b)
        d = _mul(d, d)
        if b:
            d = _mod(d, b)
    c = _mul(c, d)
    if b:
        c = _mod(c, b)
    return c


def to_terms(a, x='x'):
    """Convert polynomial a to a string with sum of powers of x.

    Terms appear in descending degree, separated by ' + '. The zero
    polynomial is rendered as the empty string.
    """
    return _to_terms(_value(a), x)


def _to_terms(a, x='x'):
    terms = []
    for i in range(a.bit_length() - 1, -1, -1):
        if (a >> i) & 1:
            if i == 0:
                terms.append('1')    # x^0 = 1
            elif i == 1:
                terms.append(x)      # x^1 = x
            else:
                terms.append(f'{x}^{i}')
    return ' + '.join(terms)


def from_terms(s, x='x'):
    """Convert string s with sum of powers of x to a polynomial."""
    return Polynomial(_from_terms(s, x))


def _from_terms(s, x='x'):
    s = ''.join(s.split())  # remove all whitespace
    if s in ('', '0'):
        return 0

    a = 0
    for term in s.split('+'):
        if term == '1':
            t = 1  # 2^0
        elif term == x:
            t = 2  # 2^1
        elif term.startswith(f'{x}^') and term[len(x)+1:].isdigit():
            t = 1 << int(term[len(x)+1:])
        else:  # illegal term
            raise ValueError('ill formatted polynomial')

        if a & t:  # repeated term
            raise ValueError('ill formatted polynomial')

        a ^= t
    if a.bit_length() - 1 > _MAX_DEGREE:
        raise OverflowError('polynomial degree exceeds 63')

    return a


def is_irreducible(a):
    """Test polynomial a for irreducibility."""
    return _is_irreducible(_value(a))


def _is_irreducible(a):
    if a <= 1:
        return False

    b = 2
    for _ in range(_degree(a) // 2):
        b = _mul(b, b)
        b = _mod(b, a)
        if _gcd(b ^ 2, a) != 1:
            return False

    return True


class Polynomial:
    """Polynomials over GF(2) represented as nonnegative integers.

    Instances are immutable; all operators return new instances.
    """

    __slots__ = ('_value',)

    def __init__(self, value=0, x='x'):
        if isinstance(value, Polynomial):
            value = value.value
        elif isinstance(value, str):
            value = _from_terms(value, x)
        elif not isinstance(value, int):
            raise TypeError('polynomial must be given by an int or str')

        if value < 0 or value.bit_length() > _MAX_DEGREE + 1:
            raise ValueError('polynomial must fit in 64 bits')

        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError('polynomials are immutable')

    @property
    def value(self):
        return self._value

    def degree(self):
        """Degree of polynomial (0 for zero polynomial)."""
        return _degree(self._value)

    def is_irreducible(self):
        """Test polynomial for irreducibility."""
        return _is_irreducible(self._value)

    def __reduce__(self):
        return type(self), (self._value,)

    def __int__(self):
        return self._value

    def __add__(self, other):
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return Polynomial(self._value ^ other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return Polynomial(self._value ^ other)

    __sub__ = __add__
    __rsub__ = __radd__

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return Polynomial(_mul(self._value, other))

    def __rmul__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return Polynomial(_mul(other, self._value))

    def __floordiv__(self, other):
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return Polynomial(_divmod(self._value, other)[0])

    def __rfloordiv__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return Polynomial(_divmod(other, self._value)[0])

    def __mod__(self, other):
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return Polynomial(_mod(self._value, other))

    def __rmod__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return Polynomial(_mod(other, self._value))

    def __divmod__(self, other):
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        q, r = _divmod(self._value, other)
        return Polynomial(q), Polynomial(r)

    def __rdivmod__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        q, r = _divmod(other, self._value)
        return Polynomial(q), Polynomial(r)

    def __pow__(self, exponent):
        if not isinstance(exponent, int):
            return NotImplemented

        return Polynomial(_powmod(self._value, exponent))

    def __lt__(self, other):
        """Strictly less-than comparison."""
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return self._value < other

    def __le__(self, other):
        """Less-than or equal comparison."""
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return self._value <= other

    def __gt__(self, other):
        """Strictly greater-than comparison."""
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return self._value > other

    def __ge__(self, other):
        """Greater-than or equal comparison."""
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return self._value >= other

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, Polynomial):
            other = other.value
        elif not isinstance(other, int):
            return NotImplemented

        return self._value == other

    def __hash__(self):
        """Hash value."""
        return hash((type(self), self._value))

    def __bool__(self):
        """Truth value testing.

        Return False if this is the zero polynomial, True otherwise.
        """
        return bool(self._value)

    def __str__(self):
        return _to_terms(self._value)

    def __repr__(self):
        return f'Polynomial({self._value:#x})'
