# Generic short Weierstrass curves with named NIST parameter sets.
# Affine coordinates, plain Python integers, not constant time.

from . import params
from .curve import Weierstrass
from .params import P224, P256, P384, P521, CurveParams
from .point import WeierstrassPoint
from .scalar import WeierstrassScalar
