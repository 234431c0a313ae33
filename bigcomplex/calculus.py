"""
This submodule collects the matrix functionality of this package. The central
ingredient is the `Matrix` type whose entries are exact `ComplexRational`
numbers. Transcendental functions are applied entry by entry after promoting
to `ComplexFloat` at the precision `Matrix.prec`, the result is stored exactly
again.

A 1x1 matrix acts as a scalar in sums, differences and products with matrices
of any shape (broadcasting). Division is only available between two such
singletons.
"""
from fractions import Fraction

import numpy as np

from . import basics
from .basics import ShapeError
from .floating import ComplexFloat
from .rational import ComplexRational


def _entry(x) -> ComplexRational:
   if isinstance(x, np.generic):
      x = x.item()
   if isinstance(x, ComplexFloat):
      return x.rat()
   return ComplexRational(x.real, x.imag)


class Matrix:
   """Basic implementation of a matrix with complex rational coefficients.

   Parameters
   ----------
   components : list[list[ComplexRational]], optional
      The rows and columns of the matrix. Entries may also be `int`,
      `Fraction`, `float`, `complex` or `ComplexFloat`, all of which are
      converted exactly. If `None` are given, yields an empty matrix.
   prec : int, optional
      Precision in bits used whenever entries are promoted to `ComplexFloat`.
      Defaults to `basics.DEFAULT_PREC`.

   Raises
   ------
   ShapeError
      If the rows are not of equal length.
   """
   def __init__(self, components:list[list[ComplexRational]]|None = None,
                prec:int|None = None):
      self.prec = basics.DEFAULT_PREC if prec is None else prec
      # Make sure that we always own complex numbers with fractional entries.
      self.components = list() if components is None \
         else [[_entry(x) for x in row] for row in components]
      if any(len(row)!=self.N for row in self.components):
         raise ShapeError("All rows of a matrix must have the same length.")

   @property
   def M(self):
      """Returns the number of rows."""
      return len(self.components)

   @property
   def N(self):
      """Returns the number of columns."""
      if self.M==0: return 0
      return len(self.components[0])

   def isSingleton(self) -> bool:
      """Checks whether this is a 1x1 matrix, i.e., a broadcastable scalar."""
      return self.M==1 and self.N==1

   @staticmethod
   def zero(M:int, N:int, prec:int|None=None):
      r"""Creates an :math:`M\times N` matrix filled with zeros."""
      return Matrix([[0]*N for r in range(M)], prec)

   @staticmethod
   def diag(delems:list[ComplexRational], M=None, N=None, prec=None):
      """Generalisation of a standard diagonal square matrix.

      The user can choose the dimensions freely as long as the diagonal entries
      fit into the matrix.

      Parameters
      ----------
      delems : list[ComplexRational]
         Diagonal elements to fill the matrix with.
      M : int, optional
         Requested number of rows. Defaults to `None`. Otherwise, must be at
         least the number of *delems* given.
      N : int, optional
         Requested number of columns. Defaults to `None`. Otherwise, must be
         at least the number of *delems* given.
      prec : int, optional
         Precision of the new matrix.

      Returns
      -------
      Matrix
         New matrix with diagonal entries set to *delems* and otherwise zero.

      Raises
      ------
      ShapeError
         If the diagonal entries do not fit.
      """
      l = len(delems)
      M = l if M is None else M
      N = l if N is None else N
      if l>M or l>N:
         raise ShapeError(("The number of diagonal entries (%i) does not "
            "fit into the requested %ix%i matrix.")%(l,M,N))
      comp = list()
      for r in range(M):
         row = [0]*N
         if r<l:
            row[r] = delems[r]
         comp.append(row)
      return Matrix(comp, prec)

   @staticmethod
   def fromNumpy(array, prec:int|None=None):
      """Builds a matrix from a two-dimensional numpy array.

      Floating-point entries are converted exactly, i.e., the binary value of
      the float is kept.
      """
      array = np.asarray(array)
      if array.ndim!=2:
         raise ShapeError("Expected a two-dimensional array but got %i "
                          "dimensions."%array.ndim)
      return Matrix([list(row) for row in array], prec)

   def toNumpy(self, exact:bool=False) -> np.ndarray:
      """Converts into a numpy array.

      Parameters
      ----------
      exact : bool, optional
         If `True`, returns an array of dtype object holding copies of the
         `ComplexRational` entries. Otherwise the entries are rounded to
         complex128. Defaults to `False`.
      """
      if exact:
         res = np.empty((self.M, self.N), dtype=object)
         for r,row in enumerate(self.components):
            for c,x in enumerate(row):
               res[r,c] = x.copy()
         return res
      return np.array([[complex(x) for x in row] for row in self.components],
                      dtype=np.complex128).reshape(self.M, self.N)

   def _broadcast(self, mat, function):
      self.components = [[function(x) for x in row] for row in mat.components]
      return self

   def _checkSameShape(self, a, b):
      if a.M!=b.M or a.N!=b.N:
         raise ShapeError("Shapes %ix%i and %ix%i do not match."
                          %(a.M,a.N,b.M,b.N))

   def add(self, a, b):
      """Sets the receiver to *a* + *b*, broadcasting 1x1 matrices.

      Raises
      ------
      ShapeError
         If neither is a singleton and the shapes differ.
      """
      if a.isSingleton() or b.isSingleton():
         if b.isSingleton():
            a, b = b, a
         value = a.components[0][0]
         return self._broadcast(b,
            lambda x: ComplexRational().add(x, value))
      self._checkSameShape(a, b)
      self.components = [[ComplexRational().add(x, y) for x,y in zip(ra,rb)]
                         for ra,rb in zip(a.components, b.components)]
      return self

   def sub(self, a, b):
      """Sets the receiver to *a* - *b*, broadcasting 1x1 matrices.

      For a singleton *a* every entry becomes ``a - b[r][c]``, for a singleton
      *b* it is ``a[r][c] - b``.

      Raises
      ------
      ShapeError
         If neither is a singleton and the shapes differ.
      """
      if a.isSingleton():
         value = a.components[0][0]
         return self._broadcast(b,
            lambda x: ComplexRational().sub(value, x))
      if b.isSingleton():
         value = b.components[0][0]
         return self._broadcast(a,
            lambda x: ComplexRational().sub(x, value))
      self._checkSameShape(a, b)
      self.components = [[ComplexRational().sub(x, y) for x,y in zip(ra,rb)]
                         for ra,rb in zip(a.components, b.components)]
      return self

   def mul(self, a, b):
      """Sets the receiver to the matrix product of *a* and *b*.

      A singleton on either side scales every entry of the other matrix.

      Raises
      ------
      ShapeError
         If the number of columns of *a* differs from the number of rows of
         *b*.
      """
      if a.isSingleton() or b.isSingleton():
         if b.isSingleton():
            a, b = b, a
         value = a.components[0][0]
         return self._broadcast(b,
            lambda x: ComplexRational().mul(x, value))
      if a.N!=b.M:
         raise ShapeError("Cannot multiply a %ix%i by a %ix%i matrix."
                          %(a.M,a.N,b.M,b.N))
      comp = list()
      for x in range(a.M):
         row = list()
         for y in range(b.N):
            temp = ComplexRational()
            for z in range(b.M):
               temp.add(temp,
                  ComplexRational().mul(a.components[x][z], b.components[z][y]))
            row.append(temp)
         comp.append(row)
      self.components = comp
      return self

   def div(self, a, b):
      """Sets the receiver to *a* / *b* for two 1x1 matrices.

      Raises
      ------
      ShapeError
         If any of the two is not a 1x1 matrix.
      ZeroDivisionError
         If *b* is zero.
      """
      if not (a.isSingleton() and b.isSingleton()):
         raise ShapeError("Can only divide 1x1 matrices but got %ix%i and "
                          "%ix%i."%(a.M,a.N,b.M,b.N))
      self.components = [[ComplexRational().div(a.components[0][0],
                                                b.components[0][0])]]
      return self

   def _promote(self, x:ComplexRational, function, *args) -> ComplexRational:
      z = ComplexFloat(prec=self.prec).setRat(x)
      return function(z, z, *args).rat()

   def _apply(self, a, function, *args):
      self.components = [[self._promote(x, function, *args) for x in row]
                         for row in a.components]
      return self

   def abs(self, a):
      """Absolute value of every entry of *a*."""
      return self._apply(a, ComplexFloat.abs)

   def conj(self, a):
      """Complex conjugate of every entry of *a*."""
      return self._apply(a, ComplexFloat.conj)

   def sqrt(self, a):
      """Principal square root of every entry of *a*."""
      return self._apply(a, ComplexFloat.sqrt)

   def atan2(self, a):
      """Principal argument of every entry of *a*.

      Raises
      ------
      ValueError
         If any entry is zero as its argument is undefined.
      """
      return self._apply(a, ComplexFloat.atan2)

   def arg(self, a):
      """arctan(Im/Re) of every entry of *a*, see `ComplexFloat.arg`."""
      return self._apply(a, ComplexFloat.arg)

   def exp(self, a):
      return self._apply(a, ComplexFloat.exp)

   def cos(self, a):
      return self._apply(a, ComplexFloat.cos)

   def sin(self, a):
      return self._apply(a, ComplexFloat.sin)

   def tan(self, a):
      return self._apply(a, ComplexFloat.tan)

   def log(self, a):
      """Natural logarithm of every entry of *a*.

      Raises
      ------
      ValueError
         If any entry is zero.
      """
      return self._apply(a, ComplexFloat.log)

   def pow(self, x, y:ComplexRational):
      """Raises every entry of *x* to the power *y*.

      Parameters
      ----------
      x : Matrix
         Matrix of bases.
      y : ComplexRational
         Common exponent.
      """
      return self._apply(x, ComplexFloat.pow,
                         ComplexFloat(prec=self.prec).setRat(_entry(y)))

   def neg(self, a):
      """Negates every entry of *a* exactly."""
      self.components = [[ComplexRational().neg(x) for x in row]
                         for row in a.components]
      return self

   def transpose(self):
      """Exchanges rows and columns.

      Returns
      -------
      Matrix
         Transposed matrix.
      """
      comp = list()
      for c in range(self.N):
         row = list()
         for r in range(self.M):
            row.append(self.components[r][c])
         comp.append(row)
      return Matrix(comp, self.prec)

   def trace(self) -> ComplexRational:
      """Computes the generalised trace.

      Returns
      -------
      ComplexRational
         Sum of all the diagonal elements.
      """
      temp = ComplexRational()
      for i in range(min([self.M,self.N])):
         temp.add(temp, self.components[i][i])
      return temp

   def format(self, exact:bool=True) -> str:
      """String representation of the matrix.

      A 1x1 matrix is rendered as its only entry, any other matrix as
      "[e11 e12 ;e21 e22 ;]".

      Parameters
      ----------
      exact : bool, optional
         If `True`, renders the exact rational entries. Otherwise the entries
         are shown as `ComplexFloat` at precision `prec`. Defaults to `True`.
      """
      if exact:
         render = str
      else:
         render = lambda x: ComplexFloat(prec=self.prec).setRat(x).format()
      if self.isSingleton():
         return render(self.components[0][0])
      s = "["
      for row in self.components:
         for x in row:
            s += render(x) + " "
         s += ";"
      return s + "]"

   def __str__(self):
      return self.format()

   def __repr__(self):
      return self.__class__.__name__ + "(%s,prec=%i)"%(
         repr(self.components), self.prec)

   def _coerce(self, x):
      if isinstance(x, Matrix):
         return x
      if isinstance(x, (ComplexRational, ComplexFloat, int, Fraction, float,
                        complex)):
         return Matrix([[x]], self.prec)
      return None

   def __add__(self, mat):
      mat = self._coerce(mat)
      if mat is None:
         return NotImplemented
      return Matrix(prec=self.prec).add(self, mat)

   def __radd__(self, mat):
      return self.__add__(mat)

   def __sub__(self, mat):
      mat = self._coerce(mat)
      if mat is None:
         return NotImplemented
      return Matrix(prec=self.prec).sub(self, mat)

   def __rsub__(self, mat):
      mat = self._coerce(mat)
      if mat is None:
         return NotImplemented
      return Matrix(prec=self.prec).sub(mat, self)

   def __mul__(self, mat):
      mat = self._coerce(mat)
      if mat is None:
         return NotImplemented
      return Matrix(prec=self.prec).mul(self, mat)

   def __rmul__(self, mat):
      mat = self._coerce(mat)
      if mat is None:
         return NotImplemented
      return Matrix(prec=self.prec).mul(mat, self)

   def __truediv__(self, mat):
      mat = self._coerce(mat)
      if mat is None:
         return NotImplemented
      return Matrix(prec=self.prec).div(self, mat)

   def __pow__(self, y):
      return Matrix(prec=self.prec).pow(self, y)

   def __neg__(self):
      return Matrix(prec=self.prec).neg(self)

   def __eq__(self, mat):
      if not isinstance(mat, Matrix):
         return NotImplemented
      return self.components==mat.components

   def __getitem__(self, idx):
      if isinstance(idx, tuple) and len(idx)==2:
         return self.components[idx[0]][idx[1]]
      raise TypeError(
         "Matrix only supports two indices specifying row and column.")

   def __setitem__(self, idx:tuple[int,int], value:ComplexRational):
      if isinstance(idx, tuple) and len(idx)==2:
         self.components[idx[0]][idx[1]] = _entry(value)
         return
      raise TypeError(
         "Matrix only supports two indices specifying row and column.")
