from __future__ import annotations

from typing import Optional, Tuple

from ..exceptions import DataTooLong, InvalidEncoding, PointDecodeFailure
from ..group import Point
from ..sampling import RandomSource, attempts, source
from ..scalar import ModScalar
from ..util import sqrt_mod, tobytes, toint

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2 with a = -1
# Field prime and prime subgroup order
p = 2**255 - 19
n = 2**252 + 27742317777372353535851937790883648493
d = -121665 * pow(121666, -1, p) % p

# Points are tuples (X, Y, Z, T) of extended coordinates modulo p,
# with x = X/Z, y = Y/Z, x*y = T/Z
Coords = Tuple[int, int, int, int]
IDENTITY: Coords = (0, 1, 1, 0)


def recover_x(y: int, negative: bool) -> int:
  """Solve the curve equation for x, choosing the root whose parity matches negative"""
  if y >= p:
    raise PointDecodeFailure("Ed25519 y coordinate out of range")
  x2 = (y * y - 1) * pow(d * y * y + 1, -1, p) % p
  if x2 == 0:
    if negative: raise PointDecodeFailure("Ed25519 x is zero but its sign bit is set")
    return 0
  x = sqrt_mod(x2, p)
  if x is None:
    raise PointDecodeFailure("Not a curve point on Ed25519")
  return p - x if x & 1 != negative else x

def affine(x: int, y: int) -> Coords:
  return x, y, 1, x * y % p

def add(P: Coords, Q: Coords) -> Coords:
  """Unified addition (also valid for doubling) in extended coordinates"""
  A = (P[1] - P[0]) * (Q[1] - Q[0]) % p
  B = (P[1] + P[0]) * (Q[1] + Q[0]) % p
  C = 2 * P[3] * Q[3] * d % p
  D = 2 * P[2] * Q[2] % p
  E, F, G, H = B - A, D - C, D + C, B + A
  return E * F % p, G * H % p, F * G % p, E * H % p

def neg(P: Coords) -> Coords:
  return -P[0] % p, P[1], P[2], -P[3] % p

def normalize(P: Coords) -> Coords:
  """Return the same point with Z = 1"""
  zinv = pow(P[2], -1, p)
  return affine(P[0] * zinv % p, P[1] * zinv % p)

def mul(s: int, P: Coords) -> Coords:
  Q = IDENTITY
  # The full curve has order 8 * n, so any point survives this reduction
  s %= 8 * n
  while s > 0:
    if s & 1: Q = add(Q, P)
    P = add(P, P)
    s >>= 1
  return normalize(Q)

def equal(P: Coords, Q: Coords) -> bool:
  # x1 / z1 == x2 / z2  <==>  x1 * z2 == x2 * z1
  return (P[0] * Q[2] - Q[0] * P[2]) % p == 0 and (P[1] * Q[2] - Q[1] * P[2]) % p == 0

# Base point (prime group generator)
gy = 4 * pow(5, -1, p) % p
BASE: Coords = affine(recover_x(gy, False), gy)


class Ed25519Point(Point):
  """A point on the Ed25519 curve, identity by default"""

  def __init__(self, group, coords: Coords = IDENTITY):
    self.group = group
    self.coords = coords

  def _operand(self, o) -> Coords:
    if not isinstance(o, Ed25519Point):
      raise TypeError(f"Cannot combine Ed25519Point with {o!r}")
    return o.coords

  def _scalar(self, s) -> int:
    if not isinstance(s, ModScalar) or s.group != self.group:
      raise TypeError(f"Cannot multiply Ed25519Point by {s!r}")
    return s.val

  @property
  def x(self) -> int: return normalize(self.coords)[0]

  @property
  def y(self) -> int: return normalize(self.coords)[1]

  @property
  def is_identity(self) -> bool: return equal(self.coords, IDENTITY)

  def equal(self, other: Point) -> bool:
    return equal(self.coords, self._operand(other))

  def null(self) -> Ed25519Point:
    self.coords = IDENTITY
    return self

  def base(self) -> Ed25519Point:
    self.coords = BASE
    return self

  def pick(self, rand: Optional[RandomSource] = None) -> Ed25519Point:
    """Uniformly random point of the prime order subgroup"""
    return self.embed(b"", rand)

  def set(self, P: Point) -> Ed25519Point:
    # Coordinates are an immutable tuple so this is a value copy
    self.coords = self._operand(P)
    return self

  def clone(self) -> Ed25519Point:
    return Ed25519Point(self.group, self.coords)

  def embed_len(self) -> int:
    # Reserve the most-significant 8 bits for pseudo-randomness.
    # Reserve the least-significant 8 bits for embedded data length.
    return (255 - 8 - 8) // 8

  def embed(self, data: bytes, rand: Optional[RandomSource] = None) -> Ed25519Point:
    """
    Set to a point whose y coordinate carries the data in its low bytes.

    The point is chosen at random among those that encode the data and belong
    to the prime order subgroup. With empty data this picks a random point.
    """
    dl = len(data)
    if dl > self.embed_len():
      raise DataTooLong(f"Cannot embed {dl} bytes, the maximum is {self.embed_len()}")
    rand = source(rand)
    for _ in attempts("embed data into an Ed25519 point"):
      b = bytearray(rand(32))
      if dl:
        b[0] = dl
        b[1:1 + dl] = data
      try:
        y, negative = decode(bytes(b))
        P = affine(recover_x(y, negative), y)
      except PointDecodeFailure:
        continue
      if not dl:
        # Drop the low order component; an unlucky low order draw gives the identity
        P = mul(8, P)
        if equal(P, IDENTITY): continue
        self.coords = P
        return self
      if equal(mul(n, P), IDENTITY):
        self.coords = P
        return self

  def data(self) -> bytes:
    """Extract data embedded by embed()"""
    b = self.marshal_binary()
    dl = b[0]
    if dl > self.embed_len():
      raise DataTooLong(f"Invalid embedded data length {dl}")
    return b[1:1 + dl]

  def add(self, P1: Point, P2: Point) -> Ed25519Point:
    self.coords = add(self._operand(P1), self._operand(P2))
    return self

  def sub(self, P1: Point, P2: Point) -> Ed25519Point:
    self.coords = add(self._operand(P1), neg(self._operand(P2)))
    return self

  def neg(self, P: Point) -> Ed25519Point:
    self.coords = neg(self._operand(P))
    return self

  def mul(self, s: ModScalar, P: Optional[Point] = None) -> Ed25519Point:
    """Set to s * P, or s * G if no point is given."""
    self.coords = mul(self._scalar(s), BASE if P is None else self._operand(P))
    return self

  def marshal_size(self) -> int: return 32

  def marshal_binary(self) -> bytes:
    """RFC 8032 compressed encoding: y with the parity of x in the high bit"""
    x, y, _, _ = normalize(self.coords)
    return tobytes(y | (x & 1) << 255, 32)

  def unmarshal_binary(self, data: bytes) -> None:
    y, negative = decode(data)
    self.coords = affine(recover_x(y, negative), y)

  def __add__(self, o): return Ed25519Point(self.group).add(self, o)
  def __sub__(self, o): return Ed25519Point(self.group).sub(self, o)
  def __neg__(self): return Ed25519Point(self.group).neg(self)

  def __mul__(self, s):
    if isinstance(s, ModScalar): s = self._scalar(s)
    if not isinstance(s, int): return NotImplemented
    return Ed25519Point(self.group, mul(s, self.coords))

  def __rmul__(self, s): return self * s

  def __eq__(self, other):
    if not isinstance(other, Ed25519Point): raise TypeError(f"Ed25519Point cannot be compared with {type(other)}")
    return self.equal(other)

  def __hash__(self): return self.y
  def __bytes__(self): return self.marshal_binary()
  def __str__(self): return self.marshal_binary().hex()
  def __repr__(self): return f"Ed25519Point({self})"


def decode(data: bytes) -> Tuple[int, bool]:
  """Separate a 32-byte encoding into the y coordinate and the sign of x."""
  if len(data) != 32:
    raise InvalidEncoding(f"Ed25519 point encoding must be 32 bytes, got {len(data)}")
  val = toint(data)
  sign = val & 1 << 255
  return val ^ sign, bool(sign)
