# Prime order group arithmetic on elliptic curves, in plain Python.
#
# Groups hand out scalars and points; their arithmetic methods compute into the
# receiver, and the Python operators return new values. Not constant time, so
# not suitable where side channels matter.

from . import sampling
from .edwards25519 import Ed25519
from .exceptions import (
  DataTooLong, InvalidEncoding, InvalidScalarEncoding, PointDecodeFailure, PointNotOnCurve, SamplingExhausted,
  SignatureLengthMismatch
)
from .group import Group, Point, Scalar
from .nist import Weierstrass
from .sign import schnorr
