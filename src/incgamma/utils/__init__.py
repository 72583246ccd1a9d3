from .machine import EPS, FPMIN
from .exceptions import ConvergenceError
