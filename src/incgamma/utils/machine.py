import numpy as np

_finfo = np.finfo(np.float64)

EPS = float(_finfo.eps)
# Guards the Lentz recurrences against division by a vanishing denominator
FPMIN = float(_finfo.tiny) / EPS
