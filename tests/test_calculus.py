from fractions import Fraction

import numpy as np
import pytest

from bigcomplex import Matrix, ComplexRational, ComplexFloat, ShapeError


@pytest.fixture
def m():
   return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def n():
   return Matrix([[2]])


def test_add(m, n):
   assert str(Matrix().add(m, m)) == \
      "[2/1 + 0/1i 4/1 + 0/1i ;6/1 + 0/1i 8/1 + 0/1i ;]"
   assert str(Matrix().add(m, n)) == \
      "[3/1 + 0/1i 4/1 + 0/1i ;5/1 + 0/1i 6/1 + 0/1i ;]"
   assert str(Matrix().add(n, m)) == \
      "[3/1 + 0/1i 4/1 + 0/1i ;5/1 + 0/1i 6/1 + 0/1i ;]"


def test_sub(m, n):
   assert str(Matrix().sub(m, m)) == \
      "[0/1 + 0/1i 0/1 + 0/1i ;0/1 + 0/1i 0/1 + 0/1i ;]"
   assert str(Matrix().sub(m, n)) == \
      "[-1/1 + 0/1i 0/1 + 0/1i ;1/1 + 0/1i 2/1 + 0/1i ;]"
   assert str(Matrix().sub(n, m)) == \
      "[1/1 + 0/1i 0/1 + 0/1i ;-1/1 + 0/1i -2/1 + 0/1i ;]"


def test_mul(m, n):
   assert str(Matrix().mul(m, m)) == \
      "[7/1 + 0/1i 10/1 + 0/1i ;15/1 + 0/1i 22/1 + 0/1i ;]"
   assert str(Matrix().mul(m, n)) == \
      "[2/1 + 0/1i 4/1 + 0/1i ;6/1 + 0/1i 8/1 + 0/1i ;]"
   assert str(Matrix().mul(n, m)) == \
      "[2/1 + 0/1i 4/1 + 0/1i ;6/1 + 0/1i 8/1 + 0/1i ;]"


def test_mul_rectangular():
   a = Matrix([[1, 2, 3]])
   b = Matrix([[1], [1j], [-1]])
   assert Matrix().mul(a, b) == Matrix([[ComplexRational(-2, 2)]])
   assert Matrix().mul(b, a).M == 3
   assert Matrix().mul(b, a).N == 3


def test_div_singletons():
   res = Matrix().div(Matrix([[1]]), Matrix([[2]]))
   assert str(res) == "1/2 + 0/1i"
   res = Matrix().div(Matrix([[ComplexRational(4, 5)]]),
                      Matrix([[ComplexRational(2, 6)]]))
   assert res[0, 0] == ComplexRational(Fraction(19, 20), Fraction(-7, 20))


def test_div_requires_singletons(m, n):
   with pytest.raises(ShapeError):
      Matrix().div(m, n)
   with pytest.raises(ShapeError):
      Matrix().div(n, m)


def test_div_by_zero():
   with pytest.raises(ZeroDivisionError):
      Matrix().div(Matrix([[1]]), Matrix([[0]]))


def test_shape_mismatch(m):
   with pytest.raises(ShapeError):
      Matrix().add(m, Matrix([[1, 2]]))
   with pytest.raises(ShapeError):
      Matrix().sub(m, Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))
   with pytest.raises(ShapeError):
      Matrix().mul(m, Matrix([[1, 2]]))


def test_shape_error_is_value_error(m):
   with pytest.raises(ValueError):
      Matrix().add(m, Matrix([[1, 2]]))


def test_ragged_rows():
   with pytest.raises(ShapeError):
      Matrix([[1, 2], [3]])


def test_receiver_may_alias_arguments(m):
   res = m.mul(m, m)
   assert res is m
   assert m == Matrix([[7, 10], [15, 22]])
   m.sub(m, m)
   assert m == Matrix.zero(2, 2)


def test_inputs_are_not_modified(m, n):
   Matrix().add(m, n)
   Matrix().mul(n, m)
   Matrix().exp(m)
   Matrix().pow(m, 2)
   assert m == Matrix([[1, 2], [3, 4]])
   assert n == Matrix([[2]])


def test_entries_are_copied():
   z = ComplexRational(1, 1)
   a = Matrix([[z]])
   z.add(z, z)
   assert a[0, 0] == ComplexRational(1, 1)


def test_elementwise_exact_results():
   assert Matrix().abs(Matrix([[ComplexRational(3, 4), -5]])) == \
      Matrix([[5, 5]])
   assert Matrix().sqrt(Matrix([[ComplexRational(5, 12)]])) == \
      Matrix([[ComplexRational(3, 2)]])
   assert Matrix().exp(Matrix.zero(2, 3)) == Matrix([[1]*3]*2)
   assert Matrix().conj(Matrix([[ComplexRational(1, 2)]])) == \
      Matrix([[ComplexRational(1, -2)]])
   assert Matrix().pow(Matrix([[2, 3], [Fraction(1, 2), 4]]), 2) == \
      Matrix([[4, 9], [Fraction(1, 4), 16]])


def test_elementwise_promotion_precision():
   a = Matrix([[Fraction(1, 3)]], prec=100)
   z = Matrix(prec=100).log(Matrix(prec=100).exp(a))
   assert abs(float(z[0, 0].re - Fraction(1, 3))) < 1e-28
   assert z[0, 0].im == 0


def test_elementwise_matches_complex_float():
   a = Matrix([[ComplexRational(1, 1), ComplexRational(2, 1)]])
   for method in ("exp", "cos", "sin", "tan", "log", "atan2", "arg"):
      res = getattr(Matrix(), method)(a)
      for c in range(2):
         expected = getattr(ComplexFloat(), method)(
            ComplexFloat().setRat(a[0, c]))
         assert res[0, c] == expected.rat()


def test_pow_matrix_exponent():
   a = Matrix([[ComplexRational(0, 1)]])
   res = Matrix().pow(a, ComplexRational(0, 1))
   assert res.format(exact=False) == "0.2078795764 + 0i"


@pytest.mark.filterwarnings("ignore::bigcomplex.UndefinedResultWarning")
def test_log_of_zero_entry():
   with pytest.raises(ValueError):
      Matrix().log(Matrix([[1, 0]]))


def test_neg(m):
   assert str(-m) == "[-1/1 + 0/1i -2/1 + 0/1i ;-3/1 + 0/1i -4/1 + 0/1i ;]"


def test_transpose_and_trace():
   a = Matrix([[1, 2, 3], [4, 5, 6]])
   assert a.transpose() == Matrix([[1, 4], [2, 5], [3, 6]])
   assert a.trace() == 6
   assert Matrix([[1, 2], [3, ComplexRational(4, 1)]]).trace() == \
      ComplexRational(5, 1)


def test_zero_and_diag():
   z = Matrix.zero(2, 3)
   assert z.M == 2 and z.N == 3
   assert all(x == 0 for row in z.components for x in row)
   d = Matrix.diag([1, 2], M=3)
   assert d == Matrix([[1, 0], [0, 2], [0, 0]])
   with pytest.raises(ShapeError):
      Matrix.diag([1, 2, 3], N=2)


def test_empty():
   a = Matrix()
   assert a.M == 0 and a.N == 0
   assert str(a) == "[]"


def test_format_inexact():
   a = Matrix([[1, Fraction(1, 2)], [Fraction(1, 3), ComplexRational(0, -1)]])
   assert a.format(exact=False) == \
      "[1 + 0i 0.5 + 0i ;0.3333333333 + 0i 0 + -1i ;]"
   assert Matrix([[Fraction(1, 2)]]).format(exact=False) == "0.5 + 0i"


def test_format_inexact_extreme_magnitudes():
   a = Matrix().exp(Matrix([[-5000, 10000]]))
   s = a.format(exact=False)
   assert s.startswith("[") and s.endswith(" ;]")
   assert "e-2172 + 0i" in s and "e+4342 + 0i" in s


def test_operators(m):
   assert m + m == Matrix().add(m, m)
   assert m - 1 == Matrix([[0, 1], [2, 3]])
   assert 1 - m == Matrix([[0, -1], [-2, -3]])
   assert 2 * m == Matrix([[2, 4], [6, 8]])
   assert m * m == Matrix([[7, 10], [15, 22]])
   assert Matrix([[3]]) / 4 == Matrix([[Fraction(3, 4)]])
   assert m ** 2 == Matrix([[1, 4], [9, 16]])


def test_item_access(m):
   assert m[1, 0] == 3
   m[1, 0] = ComplexRational(0, 1)
   assert m[1, 0] == ComplexRational(0, 1)
   with pytest.raises(TypeError):
      m[0]


def test_numpy_roundtrip():
   array = np.array([[1+2j, 0.5], [-3, 0.25j]])
   a = Matrix.fromNumpy(array)
   assert a[0, 0] == ComplexRational(1, 2)
   assert a[0, 1] == ComplexRational(Fraction(1, 2))
   assert np.allclose(a.toNumpy(), array)
   assert a.toNumpy().dtype == np.complex128


def test_numpy_exact():
   a = Matrix([[Fraction(1, 3)]])
   res = a.toNumpy(exact=True)
   assert res.dtype == object
   assert res[0, 0] == ComplexRational(Fraction(1, 3))
   res[0, 0].add(res[0, 0], res[0, 0])
   assert a[0, 0] == ComplexRational(Fraction(1, 3))


def test_numpy_rejects_other_dimensions():
   with pytest.raises(ShapeError):
      Matrix.fromNumpy(np.zeros(3))
