from typing import Optional

from ..group import Group
from ..sampling import RandomSource, source
from ..util import shabytes, tobytes, toint
from .point import Ed25519Point, n, p
from .scalar import Ed25519Scalar


def clamp(x: int) -> int:
  """Ed25519 standard clamping for scalars (from hashed secret key)"""
  # 256 bits 01[x]000  (using 251 bits of x, masking on/off others)

  # Clamped scalars are 0 mod 8, so multiplying any curve point by one lands
  # in the prime order subgroup.
  return x & (1 << 255) - 8 | 1 << 254

def secret_scalar(seed: bytes) -> int:
  """Converts a 32-byte Ed25519 secret key (seed) to its clamped scalar."""
  if len(seed) != 32: raise ValueError("Invalid length for Ed25519 secret key")
  return clamp(toint(shabytes(seed)[:32]))


class Ed25519(Group):
  """The prime order subgroup of the Ed25519 twisted Edwards curve"""
  name = "Ed25519"
  p, n = p, n

  def scalar_len(self) -> int: return 32
  def scalar(self) -> Ed25519Scalar: return Ed25519Scalar(self)
  def point_len(self) -> int: return 32
  def point(self) -> Ed25519Point: return Ed25519Point(self)

  def new_key(self, rand: Optional[RandomSource] = None) -> Ed25519Scalar:
    """
    A random secret key, hashed and clamped as in RFC 8032.

    Being a multiple of the cofactor 8, the key never exposes any bits through
    small subgroup points. The clamped bits are retained on marshal.
    """
    s = self.scalar()
    s.unmarshal_binary(tobytes(secret_scalar(source(rand)(32)), 32))
    return s

  def __eq__(self, other): return isinstance(other, Ed25519)
  def __hash__(self): return hash(self.name)
