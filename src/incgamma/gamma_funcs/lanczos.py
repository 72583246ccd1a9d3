import math

M_LN_SQRT_2PI = math.log(math.sqrt(math.pi * 2))

G = 5.0
N = 7

# Lanczos coefficients, g=5, n=7
LG5N7 = (
    1.000000000189712,
    76.18009172948503,
    -86.50532032927205,
    24.01409824118972,
    -1.2317395783752254,
    0.0012086577526594748,
    -0.00000539702438713199,
)


def ln_gamma_approx(z):
    """
    Computes log(gamma(z)) with the Lanczos approximation (g=5, n=7).
    The relative error of gamma(z) is below 2e-10 for z >= 0.5, which is
    the only range used within the package: gamma_approx() moves smaller
    arguments there with the reflection formula.

    No domain check is made. Outside z > -5.5 the result is NaN, Inf or
    a math domain error.

    """
    z = z - 1.0
    base = z + G + 0.5
    s = 0.0
    for i in range(1, N):
        s += LG5N7[i] / (z + i)
    s += LG5N7[0]
    return M_LN_SQRT_2PI + math.log(s) - base + math.log(base) * (z + 0.5)
