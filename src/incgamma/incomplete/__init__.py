from .quadrature import IncGamma, gammpapprox
from .series import gser
from .contfrac import gcf
from .gammainc import gammp, gammq
from .pgamma import pgamma
