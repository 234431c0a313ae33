"""
This submodule implements `ComplexFloat`, complex numbers whose real and
imaginary parts are arbitrary-precision binary floats (`mpmath.mpf`), together
with the elementary functions extended to the complex plane.

Each component carries its own precision in bits (`ComplexFloat.rePrec` and
`ComplexFloat.imPrec`). Results of an operation are rounded to the precision
of the receiving component, intermediate values are evaluated at the
precision of the component they are combined with. Mixing operands of
different precision is allowed and never reported.

Like `ComplexRational`, every operation writes into the receiver and returns
it. The receiver may be identical to any argument since all components are
read before the first one is overwritten. Operator overloads (``+``, ``*``,
``**``, ...) return new numbers instead.

Mathematically undefined results (argument of the origin, division by zero,
:math:`0^0`) are encoded as infinities or NaN and accompanied by an
`UndefinedResultWarning`.
"""
from fractions import Fraction

import mpmath

from . import basics
from .basics import toMpf, toFraction, pi, formatFloat, warnUndefined
from .rational import ComplexRational


# Points with a known argument, given as multiples of pi.
_EXACT_ANGLES = (
   ((1, 0),  Fraction(0)),
   ((1, 1),  Fraction(1,4)),
   ((0, 1),  Fraction(1,2)),
   ((-1, 0), Fraction(1)),
   ((0, -1), Fraction(-1,2)))


def _exactAngle(a:mpmath.mpf, b:mpmath.mpf) -> Fraction|None:
   for (x, y), turn in _EXACT_ANGLES:
      if a == x and b == y:
         return turn
   return None


def _piTimes(turn:Fraction, prec:int) -> mpmath.mpf:
   return mpmath.fdiv(mpmath.fmul(pi(prec), turn.numerator, prec=prec),
                      turn.denominator, prec=prec)


def _sqrt(x:mpmath.mpf, prec:int) -> mpmath.mpf:
   # Rounding may push a mathematically non-negative radicand below zero.
   if x < 0:
      x = mpmath.mpf(0)
   with mpmath.workprec(prec):
      return mpmath.sqrt(x)


def _quo(x:mpmath.mpf, y:mpmath.mpf, prec:int) -> mpmath.mpf:
   if y != 0:
      return mpmath.fdiv(x, y, prec=prec)
   if x == 0 or mpmath.isnan(x) or mpmath.isnan(y):
      return mpmath.mpf("nan")
   return mpmath.mpf("inf") if x>0 else mpmath.mpf("-inf")


def _norm2(x, prec:int) -> mpmath.mpf:
   return mpmath.fadd(mpmath.fmul(x.re, x.re, prec=prec),
                      mpmath.fmul(x.im, x.im, prec=x.imPrec), prec=prec)


class ComplexFloat:
   """Complex number with arbitrary-precision floating-point components.

   Parameters
   ----------
   re : int|float|str|Fraction|mpmath.mpf, optional
      Real part, defaults to 0.
   im : int|float|str|Fraction|mpmath.mpf, optional
      Imaginary part, defaults to 0.
   prec : int, optional
      Precision of the real part in bits. Defaults to `basics.DEFAULT_PREC`.
   imPrec : int, optional
      Precision of the imaginary part in bits. Defaults to *prec*.
   """
   def __init__(self, re=0, im=0, prec:int|None=None, imPrec:int|None=None):
      self.rePrec = basics.DEFAULT_PREC if prec is None else prec
      self.imPrec = self.rePrec if imPrec is None else imPrec
      self.re = toMpf(re, self.rePrec)
      self.im = toMpf(im, self.imPrec)

   def copy(self):
      return ComplexFloat(self.re, self.im, self.rePrec, self.imPrec)

   def setPrec(self, prec:int, imPrec:int|None=None):
      """Changes the precision of both components, rounding if necessary."""
      self.rePrec = prec
      self.imPrec = prec if imPrec is None else imPrec
      self.re = toMpf(self.re, self.rePrec)
      self.im = toMpf(self.im, self.imPrec)
      return self

   def add(self, a, b):
      """Sets the receiver to *a* + *b*."""
      self.re = mpmath.fadd(a.re, b.re, prec=self.rePrec)
      self.im = mpmath.fadd(a.im, b.im, prec=self.imPrec)
      return self

   def sub(self, a, b):
      """Sets the receiver to *a* - *b*."""
      self.re = mpmath.fsub(a.re, b.re, prec=self.rePrec)
      self.im = mpmath.fsub(a.im, b.im, prec=self.imPrec)
      return self

   def mul(self, a, b):
      """Sets the receiver to the complex product *a* * *b*."""
      p, q = self.rePrec, self.imPrec
      rr = mpmath.fmul(a.re, b.re, prec=p)
      ii = mpmath.fmul(a.im, b.im, prec=p)
      ri = mpmath.fmul(a.re, b.im, prec=q)
      ir = mpmath.fmul(a.im, b.re, prec=q)
      self.re = mpmath.fsub(rr, ii, prec=p)
      self.im = mpmath.fadd(ri, ir, prec=q)
      return self

   def conj(self, a):
      """Sets the receiver to the complex conjugate of *a*."""
      self.re = toMpf(a.re, self.rePrec)
      self.im = mpmath.fneg(a.im, prec=self.imPrec)
      return self

   def neg(self, a):
      """Sets the receiver to -*a*."""
      self.re = mpmath.fneg(a.re, prec=self.rePrec)
      self.im = mpmath.fneg(a.im, prec=self.imPrec)
      return self

   def div(self, a, b):
      """Sets the receiver to *a* / *b*.

      Evaluated as :math:`a\\bar{b}/(b\\bar{b})`, both components being
      divided by the real part of the denominator. Dividing by zero yields
      infinities (or NaN for vanishing numerator components) and issues an
      `UndefinedResultWarning`.
      """
      c = ComplexFloat(prec=self.rePrec, imPrec=self.imPrec).conj(b)
      x = ComplexFloat(prec=a.rePrec, imPrec=a.imPrec).mul(a, c)
      y = ComplexFloat(prec=b.rePrec, imPrec=b.imPrec).mul(b, c)
      if y.re == 0:
         warnUndefined("Division by a complex number of zero magnitude.")
      self.re = _quo(x.re, y.re, self.rePrec)
      self.im = _quo(x.im, y.re, self.imPrec)
      return self

   def abs(self, a):
      """
      Sets the receiver to the magnitude of *a*. The imaginary part is exactly
      zero at `basics.DEFAULT_PREC` afterwards.
      """
      self.re = _sqrt(_norm2(a, self.rePrec), self.rePrec)
      self.imPrec = basics.DEFAULT_PREC
      self.im = mpmath.mpf(0)
      return self

   def sqrt(self, a):
      """Sets the receiver to the principal square root of *a*.

      With :math:`l=|a|` the result reads

      .. math::
         \\sqrt{(l+\\Re a)/2} + i\\,\\mathrm{sign}(\\Im a)\\sqrt{(l-\\Re a)/2}

      such that a vanishing imaginary part of *a* yields a vanishing imaginary
      part of the result.
      """
      p, q = self.rePrec, self.imPrec
      l = _sqrt(_norm2(a, p), p)
      re = _sqrt(mpmath.fdiv(mpmath.fadd(l, a.re, prec=p), 2, prec=p), p)
      im = _sqrt(mpmath.fdiv(mpmath.fsub(l, a.re, prec=q), 2, prec=q), q)
      im = mpmath.fmul(mpmath.sign(a.im), im, prec=q)
      self.re = re
      self.im = im
      return self

   def arg(self, x):
      """Sets the real part of the receiver to arctan(Im x / Re x).

      This is the angle of *x* restricted to the right half-plane, see
      `atan2` for the principal argument. A vanishing real part yields
      :math:`\\pm\\pi/2` according to the sign of the imaginary part. The
      argument of the origin is undefined and set to +inf. A few points with
      well-known angles are evaluated directly from pi. The imaginary part of
      the receiver is zero afterwards.
      """
      a, b = x.re, x.im
      p = self.rePrec
      self.imPrec = x.imPrec
      if a == 0:
         if b < 0:
            angle = _piTimes(Fraction(-1,2), p)
         elif b == 0:
            warnUndefined("The argument of zero is undefined.")
            angle = mpmath.mpf("inf")
         else:
            angle = _piTimes(Fraction(1,2), p)
      else:
         turn = _exactAngle(a, b)
         if turn is not None:
            angle = _piTimes(turn, p)
         else:
            with mpmath.workprec(p):
               angle = mpmath.atan(mpmath.fdiv(b, a, prec=p))
      self.re = angle
      self.im = mpmath.mpf(0)
      return self

   def atan2(self, x):
      """
      Sets the real part of the receiver to the principal argument of *x* in
      :math:`(-\\pi,\\pi]`, following the usual two-argument arctangent
      conventions (see https://en.wikipedia.org/wiki/Atan2).
      """
      a, b = x.re, x.im
      self.arg(x)
      if a < 0 and _exactAngle(a, b) is None:
         if b >= 0:
            self.re = mpmath.fadd(self.re, pi(self.rePrec), prec=self.rePrec)
         else:
            self.re = mpmath.fsub(self.re, pi(self.rePrec), prec=self.rePrec)
      return self

   def exp(self, x):
      """Sets the receiver to :math:`e^x = e^{\\Re x}(\\cos\\Im x + i\\sin\\Im x)`."""
      with mpmath.workprec(x.rePrec):
         e = mpmath.exp(x.re)
      with mpmath.workprec(x.imPrec):
         c = mpmath.cos(x.im)
         s = mpmath.sin(x.im)
      self.re = mpmath.fmul(e, c, prec=self.rePrec)
      self.im = mpmath.fmul(e, s, prec=self.imPrec)
      return self

   def cos(self, x):
      """Sets the receiver to :math:`(e^{ix}+e^{-ix})/2`."""
      a = ComplexFloat(mpmath.fneg(x.im, prec=x.imPrec), x.re,
                       x.imPrec, x.rePrec)
      b = ComplexFloat(x.im, mpmath.fneg(x.re, prec=x.rePrec),
                       x.imPrec, x.rePrec)
      a.exp(a)
      b.exp(b)
      a.add(a, b)
      return self.mul(a, ComplexFloat(0.5, 0, x.rePrec, x.imPrec))

   def sin(self, x):
      """Sets the receiver to :math:`(e^{ix}-e^{-ix})/(2i)`."""
      a = ComplexFloat(x.im, mpmath.fneg(x.re, prec=x.rePrec),
                       x.imPrec, x.rePrec)
      b = ComplexFloat(mpmath.fneg(x.im, prec=x.imPrec), x.re,
                       x.imPrec, x.rePrec)
      a.exp(a)
      b.exp(b)
      a.sub(a, b)
      return self.mul(a, ComplexFloat(0, 0.5, x.rePrec, x.imPrec))

   def tan(self, x):
      """Sets the receiver to sin(*x*)/cos(*x*)."""
      s = ComplexFloat(prec=x.rePrec, imPrec=x.imPrec).sin(x)
      c = ComplexFloat(prec=x.rePrec, imPrec=x.imPrec).cos(x)
      return self.div(s, c)

   def log(self, x):
      """Sets the receiver to the principal branch of the natural logarithm.

      .. math::
         \\log x = \\log|x| + i\\,\\mathrm{atan2}(x)

      Both components take the precision of the real part of *x*. The
      logarithm of zero yields -inf for the real part.
      """
      p = x.rePrec
      with mpmath.workprec(p):
         real = mpmath.log(mpmath.sqrt(_norm2(x, p)))
      angle = ComplexFloat(prec=p, imPrec=x.imPrec).atan2(x)
      self.rePrec = self.imPrec = p
      self.re = real
      self.im = angle.re
      return self

   def pow(self, x, y):
      """Sets the receiver to :math:`x^y` on the principal branch.

      With :math:`s=|x|^2` and :math:`\\theta` the principal argument of *x*
      (see https://mathworld.wolfram.com/ComplexExponentiation.html)

      .. math::
         x^y = s^{\\Re y/2} e^{-\\Im y\\,\\theta}
            \\left(\\cos\\phi + i\\sin\\phi\\right),\\quad
         \\phi = \\Re y\\,\\theta + \\Im y\\log(s)/2\\,.

      For *x* = 0 the result is 0 if :math:`\\Re y > 0` and +inf otherwise,
      including :math:`0^0`. The latter case issues an
      `UndefinedResultWarning`.
      """
      if x.re == 0 and x.im == 0:
         if y.re > 0:
            self.re = mpmath.mpf(0)
         else:
            warnUndefined("Zero to the power of %s is undefined."
                          %y.format())
            self.re = mpmath.mpf("inf")
         self.im = mpmath.mpf(0)
         return self

      p = x.rePrec
      s = _norm2(x, p)
      theta = ComplexFloat(prec=p, imPrec=x.imPrec).atan2(x).re
      c, d = y.re, y.im
      q = y.imPrec
      # terms of the exponent keep the precision of its components
      half = mpmath.fdiv(c, 2, prec=y.rePrec)
      ctheta = mpmath.fmul(c, theta, prec=y.rePrec)
      dtheta = mpmath.fneg(mpmath.fmul(d, theta, prec=q), prec=q)
      with mpmath.workprec(p):
         logs = mpmath.log(s)
      dlog = mpmath.fdiv(mpmath.fmul(d, logs, prec=q), 2, prec=q)
      with mpmath.workprec(p):
         mag = mpmath.power(s, half) * mpmath.exp(dtheta)
         phi = ctheta + dlog
         cos = mpmath.cos(phi)
         sin = mpmath.sin(phi)
      self.re = mpmath.fmul(mag, cos, prec=self.rePrec)
      self.im = mpmath.fmul(mag, sin, prec=self.imPrec)
      return self

   def setRat(self, r:ComplexRational):
      """
      Sets the receiver to the value of *r* rounded to the precision of the
      respective component.
      """
      self.re = toMpf(r.re, self.rePrec)
      self.im = toMpf(r.im, self.imPrec)
      return self

   def rat(self, r:ComplexRational|None=None) -> ComplexRational:
      """Stores the exact value of the receiver in a `ComplexRational`.

      Parameters
      ----------
      r : ComplexRational, optional
         Target to be overwritten. A new one is created if `None`.

      Returns
      -------
      ComplexRational
         The target *r*.

      Raises
      ------
      ValueError
         If any of the components is infinite or NaN.
      """
      if r is None:
         r = ComplexRational()
      re, im = toFraction(self.re), toFraction(self.im)
      r.re = re
      r.im = im
      return r

   def isInf(self) -> bool:
      return bool(mpmath.isinf(self.re) or mpmath.isinf(self.im))

   def isNaN(self) -> bool:
      return bool(mpmath.isnan(self.re) or mpmath.isnan(self.im))

   @property
   def real(self):
      return self.re

   @property
   def imag(self):
      return self.im

   def format(self, compact:bool=False, digits:int|None=None) -> str:
      """String representation "<re> + <im>i".

      Parameters
      ----------
      compact : bool, optional
         If `True`, a vanishing imaginary part is omitted. Defaults to
         `False`.
      digits : int, optional
         Significant digits per component, defaults to
         `basics.DISPLAY_DIGITS`.
      """
      if compact and self.im == 0:
         return formatFloat(self.re, digits)
      return formatFloat(self.re, digits) + " + " + \
         formatFloat(self.im, digits) + "i"

   def __str__(self):
      return self.format()

   def __repr__(self):
      return self.__class__.__name__ + "(%s,%s,prec=%i,imPrec=%i)"%(
         formatFloat(self.re, mpmath.libmp.prec_to_dps(self.rePrec)),
         formatFloat(self.im, mpmath.libmp.prec_to_dps(self.imPrec)),
         self.rePrec, self.imPrec)

   def __bool__(self):
      return self.re != 0 or self.im != 0

   def __complex__(self):
      return complex(float(self.re), float(self.im))

   def _coerce(self, x):
      if isinstance(x, ComplexFloat):
         return x
      if isinstance(x, ComplexRational):
         return ComplexFloat(prec=self.rePrec, imPrec=self.imPrec).setRat(x)
      if isinstance(x, (int, Fraction)):
         return ComplexFloat(Fraction(x), 0, self.rePrec, self.imPrec)
      if isinstance(x, (float, complex)):
         return ComplexFloat(x.real, x.imag, self.rePrec, self.imPrec)
      if isinstance(x, mpmath.mpf):
         return ComplexFloat(x, 0, self.rePrec, self.imPrec)
      return None

   def _blank(self, other):
      return ComplexFloat(prec=max(self.rePrec, other.rePrec),
                          imPrec=max(self.imPrec, other.imPrec))

   def __eq__(self, cmp):
      cmp = self._coerce(cmp)
      if cmp is None:
         return NotImplemented
      return self.re == cmp.re and self.im == cmp.im

   def __add__(self, add):
      add = self._coerce(add)
      if add is None:
         return NotImplemented
      return self._blank(add).add(self, add)

   def __radd__(self, add):
      return self.__add__(add)

   def __sub__(self, sub):
      sub = self._coerce(sub)
      if sub is None:
         return NotImplemented
      return self._blank(sub).sub(self, sub)

   def __rsub__(self, sub):
      sub = self._coerce(sub)
      if sub is None:
         return NotImplemented
      return self._blank(sub).sub(sub, self)

   def __mul__(self, mul):
      mul = self._coerce(mul)
      if mul is None:
         return NotImplemented
      return self._blank(mul).mul(self, mul)

   def __rmul__(self, mul):
      return self.__mul__(mul)

   def __truediv__(self, div):
      div = self._coerce(div)
      if div is None:
         return NotImplemented
      return self._blank(div).div(self, div)

   def __rtruediv__(self, lhs):
      lhs = self._coerce(lhs)
      if lhs is None:
         return NotImplemented
      return self._blank(lhs).div(lhs, self)

   def __pow__(self, exponent):
      exponent = self._coerce(exponent)
      if exponent is None:
         return NotImplemented
      return self._blank(exponent).pow(self, exponent)

   def __rpow__(self, base):
      base = self._coerce(base)
      if base is None:
         return NotImplemented
      return self._blank(base).pow(base, self)

   def __neg__(self):
      return ComplexFloat(prec=self.rePrec, imPrec=self.imPrec).neg(self)

   def __abs__(self):
      return ComplexFloat(prec=self.rePrec, imPrec=self.imPrec).abs(self)
