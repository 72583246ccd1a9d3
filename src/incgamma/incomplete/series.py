import math
from ..gamma_funcs import ln_gamma_approx
from ..utils import EPS, ConvergenceError

MAXIT = 500


def gser(a, x):
    """
    Regularized lower incomplete gamma function P(a, x) by its series
    representation. Converges quickly for x < a + 1; the caller is
    responsible for staying in that regime.

    Arguments:
        a (float): Shape parameter, a > 0
        x (float): Argument, x > 0

    Returns:
        (float) P(a, x)

    """
    gln = ln_gamma_approx(a)
    ap = a
    delta = 1.0 / a
    total = delta
    for _ in range(MAXIT):
        ap += 1.0
        delta *= x / ap
        total += delta
        if math.fabs(delta) < math.fabs(total) * EPS:
            return total * math.exp(-x + a * math.log(x) - gln)
    raise ConvergenceError("gser", a, x, MAXIT)
