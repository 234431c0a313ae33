import sys
MIN_PYTHON = (3,10)
assert sys.version_info >= MIN_PYTHON, "Requires Python %s.%s or"%MIN_PYTHON \
   + " higher due to relying on union types in annotations."
del sys, MIN_PYTHON

from .basics import ShapeError, UndefinedResultWarning, formatFloat, \
   formatFraction
from .rational import ComplexRational
from .floating import ComplexFloat
from .calculus import Matrix
