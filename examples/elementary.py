# This script is a rudimentary example on how to evaluate the elementary
# functions at a chosen precision and how to work with exact matrices.
#
# Usage: python elementary.py <precision in bits> [<digits>]
import sys
from fractions import Fraction
import bigcomplex as bc

prec   = int(sys.argv[1])
digits = int(sys.argv[2]) if len(sys.argv)>2 else None

points = [bc.ComplexFloat(re, im, prec) for re,im in
          [(1,1), (0,1), (1,0), (1,2), (2,1), (-1,0), (Fraction(1,3),-2)]]

for name in ["exp", "log", "sqrt", "cos", "sin", "tan", "atan2"]:
   print(name)
   for z in points:
      res = getattr(bc.ComplexFloat(prec=prec), name)(z)
      print("   %-28s -> %s"%(z.format(digits=digits),
                                res.format(digits=digits)))

# z^z on the principal branch, 0^0 is reported as undefined.
for z in points:
   res = bc.ComplexFloat(prec=prec).pow(z, z)
   print("(%s)^(%s) = %s"%(z, z, res.format(digits=digits)))

# Matrices keep their entries exact, transcendental functions are evaluated
# entrywise at the precision of the receiver.
m = bc.Matrix([[1, 2], [3, 4]], prec)
print(m*m)
print(m - 1)
print(m.transpose()*m)
print(bc.Matrix(prec=prec).exp(m).format(exact=False))
print(bc.Matrix(prec=prec).div(bc.Matrix([[1]]), bc.Matrix([[3]])))
