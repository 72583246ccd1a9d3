import math
'''
Limits of a distribution function, on the probability or log scale.
lower_tail - P[X <= x] if True, otherwise P[X > x]
log_p - probabilities are given as log(p)
'''


def R_D_val(p, log_p):
    if not log_p:
        return p
    return math.log(p) if p > 0 else -math.inf


def R_DT_0(lower_tail, log_p):
    """Value at the left end of the support"""
    return R_D_val(0.0 if lower_tail else 1.0, log_p)


def R_DT_1(lower_tail, log_p):
    """Value at the right end of the support"""
    return R_D_val(1.0 if lower_tail else 0.0, log_p)
