from .gamma_funcs import gamma_approx, factorial, ln_gamma_approx
from .incomplete import gammp, gammq, pgamma, IncGamma
from .utils import ConvergenceError

__version__ = "0.1.0"

__all__ = ["gammp", "gammq", "gamma_approx", "factorial", "ln_gamma_approx", "pgamma", "IncGamma", "ConvergenceError"]
