import math
from .series import gser
from .contfrac import gcf
from .quadrature import gammpapprox, IncGamma

# Shape parameter above which quadrature replaces the series and the
# continued fraction
ASWITCH = 100


def _check_args(a, x, name):
    if not (x >= 0.0 and a > 0.0):
        err_msg = "Bad args in {0}: expected a > 0 and x >= 0, got a={1}, x={2}"
        raise ValueError(err_msg.format(name, a, x))


def gammp(a, x):
    """
    Regularized lower incomplete gamma function

        P(a, x) = 1 / gamma(a) * integral_0^x t^(a-1) exp(-t) dt

    The series is evaluated when it converges well (x < a + 1), the
    continued fraction for Q otherwise, and P taken as 1 - Q. Large
    shape parameters (a >= 100) go through Gauss-Legendre quadrature.

    Arguments:
        a (float): Shape parameter, a > 0
        x (float): Argument, x >= 0

    Returns:
        (float) P(a, x), in [0, 1]

    Raises:
        ValueError: if a <= 0, x < 0 or either is NaN

    """
    _check_args(a, x, "gammp")
    if x == 0:
        return 0.0
    if math.isinf(x):
        return 1.0
    if a >= ASWITCH:
        return gammpapprox(a, x, IncGamma.P)
    if x < a + 1.0:
        return gser(a, x)
    return 1.0 - gcf(a, x)


def gammq(a, x):
    """
    Regularized upper incomplete gamma function Q(a, x) = 1 - P(a, x).
    Same method selection as gammp(), computing whichever member of the
    pair is numerically stable and deriving the other.

    Arguments:
        a (float): Shape parameter, a > 0
        x (float): Argument, x >= 0

    Returns:
        (float) Q(a, x), in [0, 1]

    Raises:
        ValueError: if a <= 0, x < 0 or either is NaN

    """
    _check_args(a, x, "gammq")
    if x == 0:
        return 1.0
    if math.isinf(x):
        return 0.0
    if a >= ASWITCH:
        return gammpapprox(a, x, IncGamma.Q)
    if x < a + 1.0:
        return 1.0 - gser(a, x)
    return gcf(a, x)
