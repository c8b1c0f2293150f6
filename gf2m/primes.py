"""Catalogue of irreducible polynomials over GF(2), one for each degree 2..32.

The polynomial x is a generator (primitive element) modulo each of these polynomials.
Polynomials are not checked for irreducibility when used to build fields;
use gf2x.is_irreducible() (or 'python -m gf2m --check') to verify a modulus.
"""

from gf2m import gf2x

PRIMES = {
    2: 0b111,                                # x^2 + x + 1
    3: 0b1011,                               # x^3 + x + 1
    4: 0b10011,                              # x^4 + x + 1
    5: 0b100101,                             # x^5 + x^2 + 1
    6: 0b1000011,                            # x^6 + x + 1
    7: 0b10000011,                           # x^7 + x + 1
    8: 0b100011101,                          # x^8 + x^4 + x^3 + x^2 + 1
    9: 0b1000010001,                         # x^9 + x^4 + 1
    10: 0b10000001001,                       # x^10 + x^3 + 1
    11: 0b100000000101,                      # x^11 + x^2 + 1
    12: 0b1000001010011,                     # x^12 + x^6 + x^4 + x + 1
    13: 0b10000000011011,                    # x^13 + x^4 + x^3 + x + 1
    14: 0b100000101000011,                   # x^14 + x^8 + x^6 + x + 1
    15: 0b1000000000000011,                  # x^15 + x + 1
    16: 0b10001000000001011,                 # x^16 + x^12 + x^3 + x + 1
    17: 0b100000000000001001,                # x^17 + x^3 + 1
    18: 0b1000000000010000001,               # x^18 + x^7 + 1
    19: 0b10000000000000100111,              # x^19 + x^5 + x^2 + x + 1
    20: 0b100000000000000001001,             # x^20 + x^3 + 1
    21: 0b1000000000000000000101,            # x^21 + x^2 + 1
    22: 0b10000000000000000000011,           # x^22 + x + 1
    23: 0b100000000000000000100001,          # x^23 + x^5 + 1
    24: 0b1000000000000000010000111,         # x^24 + x^7 + x^2 + x + 1
    25: 0b10000000000000000000001001,        # x^25 + x^3 + 1
    26: 0b100000000000000000001000111,       # x^26 + x^6 + x^2 + x + 1
    27: 0b1000000000000000000000100111,      # x^27 + x^5 + x^2 + x + 1
    28: 0b10000000000000000000000001001,     # x^28 + x^3 + 1
    29: 0b100000000000000000000000000101,    # x^29 + x^2 + 1
    30: 0b1000000100000000000000000000111,   # x^30 + x^23 + x^2 + x + 1
    31: 0b10000000000000000000000000001001,  # x^31 + x^3 + 1
    32: 0b100000000010000000000000000000111,  # x^32 + x^22 + x^2 + x + 1
}

MIN_DEGREE = min(PRIMES)
MAX_DEGREE = max(PRIMES)


def prime_polynomial(d):
    """Return the catalogued irreducible polynomial of degree d."""
    try:
        return PRIMES[d]
    except KeyError:
        raise ValueError(f'no irreducible polynomial of degree {d} in catalogue '
                         f'(degrees {MIN_DEGREE}..{MAX_DEGREE})') from None


def field_order(modulus):
    """Order of the multiplicative group of the field generated by modulus.

    This is the number of distinct powers of the generator x modulo an
    irreducible (primitive) modulus of degree d, namely 2^d - 1.
    """
    return (1 << gf2x.degree(modulus)) - 1
