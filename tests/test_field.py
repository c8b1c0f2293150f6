import pickle
import unittest
import numpy as np
from gf2m import gf2x
from gf2m import field
from gf2m.primes import PRIMES


class Construction(unittest.TestCase):

    def test_width(self):
        self.assertRaises(field.ConstructionError, field.Field, PRIMES[17], 8)
        self.assertRaises(field.ConstructionError, field.Field, PRIMES[17], 16)
        self.assertRaises(field.ConstructionError, field.Field, PRIMES[9], 8)
        self.assertRaises(field.ConstructionError, field.Field, PRIMES[32], 16)
        self.assertRaises(ValueError, field.Field, PRIMES[8], 12)
        self.assertRaises(field.ConstructionError, field.Field, 1, 8)
        F = field.Field(PRIMES[17], 32)
        self.assertEqual(F.order(), 2**17)
        self.assertEqual(F.dtype, np.uint32)
        F = field.Field(PRIMES[32], 32)
        self.assertEqual(F.order(), 2**32)
        F = field.Field(PRIMES[8], 8)
        self.assertEqual(F.order(), 256)
        self.assertEqual(F.width, 8)
        self.assertEqual(F.modulus, 0x11d)
        F = field.Field(gf2x.Polynomial(PRIMES[16]))
        self.assertEqual(F.width, 64)
        self.assertEqual(F.dtype, np.uint64)

    def test_immutable(self):
        F = field.Field(PRIMES[8], 8)
        with self.assertRaises(AttributeError):
            F.modulus = PRIMES[4]
        with self.assertRaises(AttributeError):
            F._width = 16
        self.assertEqual(pickle.loads(pickle.dumps(F)), F)
        self.assertEqual(F, field.Field(PRIMES[8], 8))
        self.assertNotEqual(F, field.Field(PRIMES[8], 16))
        self.assertEqual(len({F, field.Field(PRIMES[8], 8)}), 1)
        self.assertEqual(repr(F), 'Field(0x11d, 8)')
        self.assertEqual(str(F), 'GF(2^8)')


class Arithmetic(unittest.TestCase):

    def setUp(self):
        self.f8 = field.Field(PRIMES[3], 8)
        self.f256 = field.Field(PRIMES[8], 8)

    def test_generate(self):
        F = self.f8
        powers = [0b001, 0b010, 0b100, 0b011, 0b110, 0b111, 0b101, 0b001, 0b010]
        for i, a in enumerate(powers):
            self.assertEqual(F.generate(i), a)
        self.assertEqual(F.generate(F.order() - 1), F.generate(0))
        self.assertIsInstance(F.generate(3), np.uint8)

        for d in range(2, 13):
            F = field.Field(PRIMES[d], 16)
            s = [int(F.generate(i)) for i in range(F.order() - 1)]
            self.assertListEqual(sorted(s), list(range(1, F.order())))
            self.assertEqual(F.generate(F.order() - 1), F.generate(0))

    def test_powers(self):
        F = self.f256
        table = F.powers()
        self.assertEqual(table.dtype, np.uint8)
        self.assertEqual(len(table), 255)
        for i in range(255):
            self.assertEqual(table[i], F.generate(i))

        for d in range(2, 17):
            F = field.Field(PRIMES[d], 32)
            table = F.powers()
            self.assertEqual(len(np.unique(table)), F.order() - 1)
            self.assertNotIn(0, table)

        self.assertRaises(ValueError, field.Field(PRIMES[25], 32).powers)
        self.assertRaises(ValueError, field.Field(PRIMES[32], 32).powers)

    def test_add(self):
        F = self.f256
        self.assertEqual(F.add(), 0)
        self.assertEqual(F.add(0x53), 0x53)
        self.assertEqual(F.add(0x53, 0), 0x53)
        self.assertEqual(F.add(0x53, 0x53), 0)
        self.assertEqual(F.add(9, 10, 11), 8)
        self.assertEqual(F.sub(9, 10), 3)
        self.assertIsInstance(F.add(1, 2), np.uint8)
        for a in range(256):
            self.assertEqual(F.add(a, 0), a)
            self.assertEqual(F.add(a, a), 0)

    def test_mul(self):
        F = self.f256
        self.assertEqual(F.mul(), 0)
        self.assertEqual(F.mul(0x53), 0x53)
        self.assertEqual(F.mul(0x53, 0), 0)
        self.assertEqual(F.mul(0, 0x53, 0xCA), 0)
        self.assertEqual(F.mul(0xBC, 0xDE), 0x6D)
        self.assertEqual(F.mul(0xFF, 0xDE), 0x8B)
        self.assertEqual(F.mul(2, 2, 2, 2, 2, 2, 2, 2), F.generate(8))
        self.assertEqual(F.mul(np.uint8(0xBC), np.uint8(0xDE)), 0x6D)
        self.assertIsInstance(F.mul(0xBC, 0xDE), np.uint8)
        for a in range(256):
            self.assertEqual(F.mul(a, 1), a)
            self.assertEqual(F.mul(a, 0), 0)

        exponents = [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2), (3, 7), (11, 254), (374, 481)]
        for i, j in exponents:
            self.assertEqual(F.mul(F.generate(i), F.generate(j)), F.generate(i + j))

    def test_mul_modulus(self):
        F = field.Field(PRIMES[16], 16)
        self.assertEqual(F.mul(0x1234, 0x5678), 0x6324)
        # x^16 + x^13 + x^12 + x^10 + x^9 + x^7 + x^6 + x + 1
        F = field.Field(0b10011011011000011, 16)
        self.assertEqual(F.mul(0x1234, 0x5678), 0xA051)
        self.assertIsInstance(F.mul(0x1234, 0x5678), np.uint16)

    def test_distributivity(self):
        F = self.f256
        self.assertEqual(F.mul(100, F.add(10, 5)), F.add(F.mul(100, 10), F.mul(100, 5)))
        F = field.Field(PRIMES[4], 8)
        self.assertEqual(F.mul(5, F.add(9, 10, 11)),
                         F.add(F.mul(5, 9), F.mul(5, 10), F.mul(5, 11)))
        F = field.Field(PRIMES[4], 8)
        for a in range(16):
            for b in range(16):
                for c in range(16):
                    self.assertEqual(F.mul(a, F.add(b, c)), F.add(F.mul(a, b), F.mul(a, c)))

    def test_inverse(self):
        for d in range(2, 11):
            F = field.Field(PRIMES[d], 16)
            for i in range(F.order() - 1):
                a = F.generate(i)
                b = F.mult_inverse(a)
                self.assertEqual(F.mul(a, b), 1)
                self.assertLess(b, F.order())
        F = self.f256
        self.assertEqual(F.mult_inverse(1), 1)
        self.assertIsInstance(F.mult_inverse(3), np.uint8)
        self.assertRaises(ZeroDivisionError, F.mult_inverse, 0)

    def test_div(self):
        F = self.f256
        self.assertEqual(F.div(0x6D, 0xBC), 0xDE)
        self.assertEqual(F.div(0x8B, 0xDE), 0xFF)
        self.assertEqual(F.div(0, 0xDE), 0)
        self.assertEqual(F.div(1, 0xDE), F.mult_inverse(0xDE))
        self.assertRaises(ZeroDivisionError, F.div, 1, 0)
        self.assertRaises(ZeroDivisionError, F.div, 0, 0)

        F = field.Field(PRIMES[4], 8)
        for a in range(16):
            for b in range(1, 16):
                self.assertEqual(F.div(F.mul(a, b), b), a)
                self.assertEqual(F.mul(F.div(a, b), b), a)

    def test_exp(self):
        F = field.Field(PRIMES[6], 8)
        self.assertEqual(F.exp(0b100101, 0), 1)
        self.assertEqual(F.exp(0b100101, 1), 0b100101)
        F = field.Field(PRIMES[3], 8)
        self.assertEqual(F.exp(0b100101, 4), 0b110)
        F = field.Field(PRIMES[4], 8)
        self.assertEqual(F.exp(0b11, 7), 0b1101)
        self.assertEqual(F.exp(0b1011, 15), 1)
        self.assertEqual(F.exp(0b1011, 16), 0b1011)
        self.assertEqual(F.exp(gf2x.GENERATOR, F.order() - 1), 1)
        F = field.Field(PRIMES[5], 8)
        self.assertEqual(F.exp(0b10011, 32), 0b10011)
        self.assertEqual(F.exp(0b10001, 2), 0b1100)

        F = self.f256
        self.assertEqual(F.exp(0, 0), 1)
        self.assertEqual(F.exp(0, 1), 0)
        self.assertEqual(F.exp(0, 255), 0)
        self.assertRaises(ZeroDivisionError, F.exp, 0, -1)
        for a in range(1, 256):
            self.assertEqual(F.exp(a, 0), 1)
            self.assertEqual(F.exp(a, 255), 1)
            self.assertEqual(F.exp(a, -1), F.mult_inverse(a))
        for i in range(0, 600, 7):
            self.assertEqual(F.exp(gf2x.GENERATOR, i), F.generate(i))
        self.assertEqual(F.exp(0x53, 3), F.mul(0x53, 0x53, 0x53))
        self.assertIsInstance(F.exp(3, 2), np.uint8)

    def test_numpy_exponents(self):
        F = self.f256
        self.assertEqual(F.generate(np.uint8(3)), 8)
        self.assertEqual(F.generate(F.generate(3)), F.generate(8))
        self.assertEqual(F.generate(np.int64(-1)), F.generate(254))
        self.assertEqual(F.exp(3, np.uint64(2)), 5)
        self.assertEqual(F.exp(3, np.int64(-1)), F.mult_inverse(3))
        self.assertEqual(F.exp(3, np.uint8(0)), 1)
        self.assertEqual(F.exp(0, np.uint16(7)), 0)
        self.assertEqual(F.exp(gf2x.GENERATOR, F.mul(0xBC, 0xDE)), F.generate(0x6D))

    def test_unreduced_inputs(self):
        F = field.Field(PRIMES[8], 16)
        self.assertRaises(ZeroDivisionError, F.mult_inverse, PRIMES[8])
        self.assertRaises(ZeroDivisionError, F.mult_inverse, gf2x.mul(PRIMES[8], 0b101))
        self.assertRaises(ZeroDivisionError, F.div, 1, PRIMES[8])
        self.assertEqual(F.mult_inverse(0x100), F.mult_inverse(0x1d))
        self.assertEqual(F.div(0x100, 0x11c), 0x1d)
        self.assertEqual(F.div(0x6D | 0x11d00, 0xBC), 0xDE)
        F = field.Field(PRIMES[32])
        a = 0xFFFFFFFFFFFFFFFF
        self.assertEqual(F.div(a, 2), F.mul(gf2x.mod(a, PRIMES[32]), F.mult_inverse(2)))

    def test_large_field(self):
        F = field.Field(PRIMES[32], 32)
        a = 0b10101010101010101010101010101010
        b = F.mult_inverse(a)
        self.assertEqual(F.mul(a, b), 1)
        self.assertEqual(F.div(1, a), b)
        self.assertEqual(F.exp(a, F.order() - 2), b)
        self.assertEqual(F.exp(a, F.order() - 1), 1)
        self.assertEqual(F.exp(a, F.order()), a)
        self.assertEqual(F.generate(F.order() - 1), 1)
        self.assertIsInstance(F.mul(a, b), np.uint32)
        F = field.Field(PRIMES[32])
        self.assertEqual(F.mul(a, F.mult_inverse(a)), 1)
        self.assertIsInstance(F.mul(a, a), np.uint64)

    def test_reducible_modulus(self):
        F = field.Field(0b101, 8)  # x^2 + 1 = (x + 1)^2
        self.assertRaises(gf2x.InvariantViolation, F.mult_inverse, 3)
        self.assertRaises(gf2x.InvariantViolation, F.div, 1, 3)
        self.assertEqual(F.mult_inverse(2), 2)


if __name__ == "__main__":
    unittest.main()
