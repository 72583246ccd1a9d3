from .lanczos import ln_gamma_approx
from .gammafn import gamma_approx, factorial
