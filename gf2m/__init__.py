"""gf2m is a Python package for arithmetic in binary finite fields GF(2^m), 2<=m<=32.

Field elements are polynomials with coefficients in GF(2), represented by integers
whose bits are the coefficients, and reduced modulo an irreducible polynomial.
Such fields underlie Reed-Solomon and other erasure codes, secret sharing schemes,
and various cryptographic primitives.

Modules:

    gf2x     arithmetic with polynomials over GF(2) of degree at most 63
    primes   catalogue of irreducible polynomials of degree 2 up to 32
    field    class Field for arithmetic with a fixed modulus and output width
    element  class FieldElement for elements carrying their own modulus

Run 'python -m gf2m' to list the catalogue of irreducible polynomials.
"""

__version__ = '0.3.0'
__license__ = 'MIT License'
