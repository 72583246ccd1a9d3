import math
import warnings
from .gammainc import gammp, gammq
from ..utils.dpq_handling import R_D_val, R_DT_0, R_DT_1


def pgamma(q, shape, scale=1.0, lower_tail=True, log_p=False):
    '''
    The gamma distribution function

    @param q: A quantile

    @param shape: Shape parameter of the distribution

    @param scale: Scale parameter of the distribution

    @param lower_tail: probabilities are P[X <= q], otherwise, P[X > q]

    @param log_p: Probabilities are given as log(p)

    '''
    if math.isnan(q) or math.isnan(shape) or math.isnan(scale):
        return q + shape + scale

    if shape <= 0 or scale <= 0:
        warnings.warn(
            "pgamma(): invalid parameters shape={0}, scale={1}, returning NaN".format(shape, scale),
            RuntimeWarning,
        )
        return math.nan

    if q <= 0:
        return R_DT_0(lower_tail, log_p)
    if q == float('Inf'):
        return R_DT_1(lower_tail, log_p)

    x = q / scale
    p = gammp(shape, x) if lower_tail else gammq(shape, x)
    return R_D_val(p, log_p)
