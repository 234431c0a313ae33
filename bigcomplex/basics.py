"""
This submodule implements the most basic ingredients used throughout the
package: the module-wide settings, the error and warning types as well as the
conversion between `mpmath.mpf` floats, `Fraction` and their string
representation.

All floating-point work is delegated to `mpmath <https://mpmath.org>`_. The
precision of a float is always given in bits and is passed explicitly, i.e.,
the global `mpmath.mp` context is never modified by this package.

Attributes
----------
DEFAULT_PREC : int
   Precision in bits assumed for new floats and matrices if nothing else is
   specified. The default of 53 bits matches the mantissa of a float64. Any
   change affects all values created afterwards.
DISPLAY_DIGITS : int
   Number of significant decimal digits used by `formatFloat`.
"""
from fractions import Fraction
import warnings

import mpmath


DEFAULT_PREC   = 53
DISPLAY_DIGITS = 10


class ShapeError(ValueError):
   """Raised if the shapes of matrices do not fit the requested operation."""


class UndefinedResultWarning(RuntimeWarning):
   """
   Issued whenever a result is mathematically undefined and has been encoded
   as an infinity or NaN instead, e.g. the argument of the origin.
   """


def warnUndefined(msg:str):
   warnings.warn(msg, UndefinedResultWarning, stacklevel=3)


def toMpf(x, prec:int) -> mpmath.mpf:
   """Converts *x* into an `mpmath.mpf` rounded to *prec* bits.

   Parameters
   ----------
   x : int|float|str|Fraction|mpmath.mpf
      Value to be converted. Strings may also read "inf", "-inf" or "nan".
   prec : int
      Precision of the result in bits.

   Returns
   -------
   mpmath.mpf
      Correctly rounded value of *x*.
   """
   if isinstance(x, Fraction):
      return mpmath.fdiv(x.numerator, x.denominator, prec=prec)
   with mpmath.workprec(prec):
      return mpmath.mpf(x)


def toFraction(x:mpmath.mpf) -> Fraction:
   """Exact conversion of a finite binary float into a `Fraction`.

   Raises
   ------
   ValueError
      If *x* is infinite or NaN.
   """
   if not mpmath.isfinite(x):
      raise ValueError("Cannot represent %s as a rational number."
                       %formatFloat(x))
   man, exp = abs(x).man_exp
   res = Fraction(man << exp) if exp>=0 else Fraction(man, 1 << -exp)
   return -res if x<0 else res


def pi(prec:int) -> mpmath.mpf:
   """Returns pi rounded to *prec* bits."""
   with mpmath.workprec(prec):
      return +mpmath.pi


def _roundDecimal(x:mpmath.mpf, digits:int) -> tuple[int,int]:
   """
   Rounds the finite, positive *x* half to even onto *digits* significant
   decimal digits.

   Returns
   -------
   tuple[int,int]
      Integer *head* with exactly *digits* digits and exponent *dexp* such
      that :math:`x \\approx head\\cdot 10^{dexp}`.
   """
   man, exp = x.man_exp
   # Estimate of the leading decimal position, corrected below if off by one.
   with mpmath.workprec(32):
      lead = int(mpmath.floor(mpmath.log10(x)))
   while True:
      # x*10^shift = man*5^shift*2^(exp+shift) as the fraction num/den
      shift = digits - 1 - lead
      num, den = man, 1
      if shift>=0:
         num *= 5**shift
      else:
         den *= 5**(-shift)
      if exp+shift>=0:
         num <<= exp+shift
      else:
         den <<= -(exp+shift)
      head, rest = divmod(num, den)
      if head >= 10**digits:
         lead += 1
      elif head < 10**(digits-1):
         lead -= 1
      else:
         break
   if 2*rest > den or (2*rest == den and head%2 == 1):
      head += 1
   if head == 10**digits:
      head //= 10
      shift -= 1
   return head, -shift


def formatFloat(x:mpmath.mpf, digits:int|None=None) -> str:
   """
   Renders a float with *digits* significant decimal digits in the style of
   C's ``%g``: trailing zeros are dropped and an exponent is only used for
   very small or very large magnitudes.

   Parameters
   ----------
   x : mpmath.mpf
      Value to be rendered.
   digits : int, optional
      Number of significant digits. Defaults to `DISPLAY_DIGITS`.

   Returns
   -------
   str
      E.g. "7.071067812", "-0.35", "3", "1.5e+20", "+Inf" or "NaN".
   """
   digits = DISPLAY_DIGITS if digits is None else digits
   if mpmath.isnan(x):
      return "NaN"
   if mpmath.isinf(x):
      return "+Inf" if x>0 else "-Inf"
   if x == 0:
      return "0"
   sign = "-" if x<0 else ""
   head, dexp = _roundDecimal(abs(x), digits)
   s = str(head)
   stripped = s.rstrip("0")
   dexp += len(s) - len(stripped)
   s = stripped
   lead = dexp + len(s) - 1

   eprec = digits
   if eprec > len(s) and len(s) >= lead+1:
      eprec = len(s)
   if lead < -4 or lead >= eprec:
      mant = s[0] + ("." + s[1:] if len(s)>1 else "")
      return sign + mant + "e%s%02d"%("+" if lead>=0 else "-", abs(lead))
   point = lead + 1
   if point <= 0:
      return sign + "0." + "0"*(-point) + s
   if point >= len(s):
      return sign + s + "0"*(point-len(s))
   return sign + s[:point] + "." + s[point:]


def formatFraction(x:Fraction) -> str:
   """Renders a rational number as "p/q", the denominator is always shown."""
   return "%i/%i"%(x.numerator, x.denominator)
