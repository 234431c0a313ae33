from fractions import Fraction

import pytest

from bigcomplex import ComplexRational, ComplexFloat


def test_div():
   a = ComplexRational(4, 5)
   b = ComplexRational(2, 6)
   a.div(a, b)
   assert str(a) == "19/20 + -7/20i"


def test_div_by_zero():
   with pytest.raises(ZeroDivisionError):
      ComplexRational(1, 1).div(ComplexRational(1, 1), ComplexRational())


def test_str():
   assert str(ComplexRational(7)) == "7/1 + 0/1i"
   assert str(ComplexRational(Fraction(-1, 3), Fraction(5, 2))) == \
      "-1/3 + 5/2i"


def test_arithmetic():
   a = ComplexRational(1, 2)
   b = ComplexRational(Fraction(1, 2), -3)
   assert ComplexRational().add(a, b) == ComplexRational(Fraction(3, 2), -1)
   assert ComplexRational().sub(a, b) == ComplexRational(Fraction(1, 2), 5)
   assert ComplexRational().mul(a, b) == ComplexRational(Fraction(13, 2), -2)
   assert ComplexRational().conj(a) == ComplexRational(1, -2)
   assert ComplexRational().neg(a) == ComplexRational(-1, -2)


def test_receiver_may_alias_arguments():
   a = ComplexRational(1, 2)
   res = a.mul(a, a)
   assert res is a
   assert a == ComplexRational(-3, 4)
   a.div(a, a)
   assert a == 1


def test_chaining():
   z = ComplexRational()
   z.add(ComplexRational(1), ComplexRational(0, 1)).mul(z, z)
   assert z == ComplexRational(0, 2)


def test_operators():
   a = ComplexRational(1, 1)
   assert a + 1 == ComplexRational(2, 1)
   assert 1 - a == ComplexRational(0, -1)
   assert 2 * a == ComplexRational(2, 2)
   assert a / 2 == ComplexRational(Fraction(1, 2), Fraction(1, 2))
   assert 1 / a == ComplexRational(Fraction(1, 2), Fraction(-1, 2))
   assert -a == ComplexRational(-1, -1)
   assert a**2 == ComplexRational(0, 2)
   assert a**-1 == ComplexRational(Fraction(1, 2), Fraction(-1, 2))
   assert a + 1j == ComplexRational(1, 2)
   # operands are not modified
   assert a == ComplexRational(1, 1)


def test_conj_twice_is_identity():
   z = ComplexRational(Fraction(3, 7), Fraction(-2, 9))
   assert ComplexRational().conj(ComplexRational().conj(z)) == z


def test_abs2_and_conjugate():
   z = ComplexRational(3, 4)
   assert z.abs2() == 25
   assert z.conjugate() == ComplexRational(3, -4)
   assert z * z.conjugate() == 25


def test_float_input_is_exact():
   assert ComplexRational(0.1).re == Fraction(0.1)
   assert ComplexRational("1/3", "0.25") == \
      ComplexRational(Fraction(1, 3), Fraction(1, 4))


def test_to_float():
   z = ComplexRational(Fraction(1, 3), 2).toFloat(100)
   assert isinstance(z, ComplexFloat)
   assert z.rePrec == 100 and z.imPrec == 100
   assert z.rat().im == 2
