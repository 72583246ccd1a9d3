import math
from .lanczos import ln_gamma_approx

# (MAX_FACTORIAL_ARG - 1)! is the largest factorial below the double range
MAX_FACTORIAL_ARG = 171


def factorial(n):
    '''
    Exact n! by iterative multiplication

    @param n: A non-negative integer

    '''
    if n < 0 or n != math.floor(n):
        raise ValueError("factorial() expects a non-negative integer, got {0}".format(n))

    p = 1
    for i in range(1, int(n) + 1):
        p *= i
    return p


def gamma_approx(z):
    '''
    The gamma function.

    Positive integers go through the exact factorial, arguments below
    0.5 through the reflection formula
        gamma(z) = pi / (sin(pi z) gamma(1 - z))
    and everything else through exp(ln_gamma_approx(z)).

    Non-positive integers are poles and are not checked: z = 0 raises
    ZeroDivisionError, negative integers give a huge finite value.
    Results beyond the double range raise OverflowError, results below
    it (large negative z) are a signed zero.

    @param z: A real number

    '''
    if 1 <= z <= MAX_FACTORIAL_ARG and z == math.floor(z):
        return float(factorial(int(z) - 1))

    if z < 0.5:
        sinpiz = math.sin(math.pi * z)
        # 1 - z >= 0.5 so the recursion stops after one call
        try:
            reflected = gamma_approx(1.0 - z)
        except OverflowError:
            # gamma(z) underflows
            return math.copysign(0.0, sinpiz)
        return math.pi / (sinpiz * reflected)
    return math.exp(ln_gamma_approx(z))
