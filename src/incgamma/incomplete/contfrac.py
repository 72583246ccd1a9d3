import math
from ..gamma_funcs import ln_gamma_approx
from ..utils import EPS, FPMIN, ConvergenceError

MAXIT = 500


def gcf(a, x):
    """
    Regularized upper incomplete gamma function Q(a, x) by its continued
    fraction representation, evaluated with the modified Lentz method.
    Converges quickly for x >= a + 1; the caller is responsible for
    staying in that regime.

    Arguments:
        a (float): Shape parameter, a > 0
        x (float): Argument, x > 0

    Returns:
        (float) Q(a, x)

    """
    gln = ln_gamma_approx(a)
    b = x + 1.0 - a
    c = 1.0 / FPMIN
    d = 1.0 / b
    h = d
    for i in range(1, MAXIT + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if math.fabs(d) < FPMIN:
            d = FPMIN
        c = b + an / c
        if math.fabs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if math.fabs(delta - 1.0) < EPS:
            return math.exp(-x + a * math.log(x) - gln) * h
    raise ConvergenceError("gcf", a, x, MAXIT)
