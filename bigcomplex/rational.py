"""
This submodule implements `ComplexRational`, complex numbers with exact
rational real and imaginary parts. Only algebraic operations are available
since rational numbers are not closed under roots, exponentials etc. For those
convert to `ComplexFloat` via `ComplexRational.toFloat` first.

All in-place operations follow the same pattern: the receiver is used as the
output slot and returned afterwards, i.e.,

::

   z = ComplexRational()
   z.add(a, b).mul(z, c)   # z = (a+b)*c

The receiver may be identical to any of the arguments.
"""
from fractions import Fraction

from .basics import formatFraction


class ComplexRational:
   """Complex number with `Fraction`-valued components.

   Parameters
   ----------
   re : int|Fraction|float|str, optional
      Real part of the complex number, defaults to 0. Floats are converted
      exactly.
   im : int|Fraction|float|str, optional
      Imaginary part of the complex number, defaults to 0.
   """
   def __init__(self, re:int|Fraction|float|str=0,
                im:int|Fraction|float|str=0):
      self.re = Fraction(re)
      self.im = Fraction(im)

   def add(self, a, b):
      """Sets the receiver to *a* + *b*."""
      self.re = a.re + b.re
      self.im = a.im + b.im
      return self

   def sub(self, a, b):
      """Sets the receiver to *a* - *b*."""
      self.re = a.re - b.re
      self.im = a.im - b.im
      return self

   def mul(self, a, b):
      """Sets the receiver to the complex product *a* * *b*."""
      re = a.re*b.re - a.im*b.im
      im = a.re*b.im + a.im*b.re
      self.re = re
      self.im = im
      return self

   def conj(self, a):
      """Sets the receiver to the complex conjugate of *a*."""
      self.re = a.re
      self.im = -a.im
      return self

   def neg(self, a):
      """Sets the receiver to -*a*."""
      self.re = -a.re
      self.im = -a.im
      return self

   def div(self, a, b):
      """Sets the receiver to *a* / *b*.

      Evaluated as :math:`a\\bar{b}/(b\\bar{b})` where only the real part of
      the denominator is used as its imaginary part vanishes identically.

      Raises
      ------
      ZeroDivisionError
         If *b* is zero.
      """
      c = ComplexRational().conj(b)
      x = ComplexRational().mul(a, c)
      y = ComplexRational().mul(b, c)
      self.re = x.re / y.re
      self.im = x.im / y.re
      return self

   def abs2(self) -> Fraction:
      """Computes z*conjugate(z) of the complex number z.

      Returns
      -------
      Fraction
         Absolute value squared of the current complex number.
      """
      return self.re*self.re + self.im*self.im

   def conjugate(self):
      """Returns the complex conjugate as a new number."""
      return ComplexRational().conj(self)

   def toFloat(self, prec:int|None=None):
      """Converts into a `ComplexFloat`.

      Parameters
      ----------
      prec : int, optional
         Precision in bits of both components. Defaults to
         `basics.DEFAULT_PREC`.

      Returns
      -------
      ComplexFloat
         Both components correctly rounded to *prec* bits.
      """
      from .floating import ComplexFloat
      return ComplexFloat(prec=prec).setRat(self)

   def copy(self):
      return ComplexRational(self.re, self.im)

   @property
   def real(self):
      """
      Returns the real part of the complex number to comply with standard
      Python number interface.
      """
      return self.re

   @property
   def imag(self):
      """
      Returns the imaginary part of the complex number to comply with standard
      Python number interface.
      """
      return self.im

   @staticmethod
   def _coerce(x):
      if isinstance(x, ComplexRational):
         return x
      if isinstance(x, (int, Fraction, float, complex)):
         return ComplexRational(x.real, x.imag)
      return None

   def __bool__(self):
      return self.re!=0 or self.im!=0

   def __eq__(self, cmp):
      cmp = self._coerce(cmp)
      if cmp is None:
         return NotImplemented
      return self.re==cmp.re and self.im==cmp.im

   def __repr__(self):
      return self.__class__.__name__ + "(%s,%s)"%(str(self.re),str(self.im))

   def __str__(self):
      return formatFraction(self.re) + " + " + formatFraction(self.im) + "i"

   def __complex__(self):
      return complex(float(self.re), float(self.im))

   def __add__(self, add):
      add = self._coerce(add)
      if add is None:
         return NotImplemented
      return ComplexRational().add(self, add)

   def __radd__(self, add):
      return self.__add__(add)

   def __sub__(self, sub):
      sub = self._coerce(sub)
      if sub is None:
         return NotImplemented
      return ComplexRational().sub(self, sub)

   def __rsub__(self, sub):
      sub = self._coerce(sub)
      if sub is None:
         return NotImplemented
      return ComplexRational().sub(sub, self)

   def __mul__(self, mul):
      mul = self._coerce(mul)
      if mul is None:
         return NotImplemented
      return ComplexRational().mul(self, mul)

   def __rmul__(self, mul):
      return self.__mul__(mul)

   def __truediv__(self, div):
      div = self._coerce(div)
      if div is None:
         return NotImplemented
      return ComplexRational().div(self, div)

   def __rtruediv__(self, lhs):
      lhs = self._coerce(lhs)
      if lhs is None:
         return NotImplemented
      return ComplexRational().div(lhs, self)

   def __neg__(self):
      return ComplexRational().neg(self)

   def __pow__(self, n:int):
      if not isinstance(n, int): return NotImplemented
      temp = ComplexRational(1)
      for i in range(abs(n)):
         temp.mul(temp, self)
      return 1/temp if n<0 else temp
