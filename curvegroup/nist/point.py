from __future__ import annotations

from typing import Optional, Tuple

from ..exceptions import DataTooLong, InvalidEncoding, PointDecodeFailure, PointNotOnCurve
from ..group import Point
from ..sampling import RandomSource, attempts, source
from ..scalar import ModScalar
from ..util import bytelen, sqrt_mod, tobytes, toint


class WeierstrassPoint(Point):
  """
  A point on a short Weierstrass curve in affine coordinates.

  The point at infinity (identity) is represented by xy = None and encodes
  as an all-zero X9.62 payload.
  """

  def __init__(self, group, xy: Optional[Tuple[int, int]] = None):
    self.group = group
    self.xy = xy

  def _operand(self, o):
    if not isinstance(o, WeierstrassPoint) or o.group != self.group:
      raise TypeError(f"Cannot combine a {self.group.name} point with {o!r}")
    return o.xy

  def _scalar(self, s) -> int:
    if not isinstance(s, ModScalar) or s.group != self.group:
      raise TypeError(f"Cannot multiply a {self.group.name} point by {s!r}")
    return s.val

  @property
  def x(self) -> Optional[int]: return None if self.xy is None else self.xy[0]

  @property
  def y(self) -> Optional[int]: return None if self.xy is None else self.xy[1]

  @property
  def is_identity(self) -> bool: return self.xy is None

  def equal(self, other: Point) -> bool:
    return self.xy == self._operand(other)

  def null(self) -> WeierstrassPoint:
    self.xy = None
    return self

  def base(self) -> WeierstrassPoint:
    self.xy = self.group.g
    return self

  def pick(self, rand: Optional[RandomSource] = None) -> WeierstrassPoint:
    """Random curve point"""
    return self.embed(b"", rand)

  def set(self, P: Point) -> WeierstrassPoint:
    self.xy = self._operand(P)
    return self

  def clone(self) -> WeierstrassPoint:
    return WeierstrassPoint(self.group, self.xy)

  def _field_len(self) -> int: return bytelen(self.group.p.bit_length())

  def embed_len(self) -> int:
    # Reserve the most-significant 8 bits for pseudo-randomness.
    # Reserve the least-significant 8 bits for embedded data length.
    return (self.group.p.bit_length() - 8 - 8) // 8

  def embed(self, data: bytes, rand: Optional[RandomSource] = None) -> WeierstrassPoint:
    """
    Set to a random point whose x coordinate carries the data.

    The last byte of the big endian x holds the data length and the data sits
    right before it. With empty data this picks a random point.
    """
    dl = len(data)
    if dl > self.embed_len():
      raise DataTooLong(f"Cannot embed {dl} bytes, the maximum is {self.embed_len()}")
    rand = source(rand)
    p = self.group.p
    bitlen = p.bit_length()
    l = self._field_len()
    for _ in attempts(f"embed data into a {self.group.name} point"):
      b = bytearray(rand(l))
      if bitlen & 7:
        b[0] &= ~(0xFF << (bitlen & 7)) & 0xFF
      if dl:
        b[l - 1] = dl
        b[l - dl - 1:l - 1] = data
      x = toint(b, "big")
      if x >= p: continue
      y2 = self.group.rhs(x)
      y = sqrt_mod(y2, p)
      if y is None: continue
      # Choose either of the two roots
      if rand(1)[0] & 0x80: y = (p - y) % p
      if y * y % p == y2:
        self.xy = x, y
        return self

  def data(self) -> bytes:
    """Extract data embedded by embed()"""
    if self.xy is None:
      raise ValueError("The point at infinity carries no data")
    l = self._field_len()
    b = tobytes(self.xy[0], l, "big")
    dl = b[l - 1]
    if dl > self.embed_len():
      raise DataTooLong(f"Invalid embedded data length {dl}")
    return b[l - dl - 1:l - 1]

  def add(self, P1: Point, P2: Point) -> WeierstrassPoint:
    self.xy = self.group.add(self._operand(P1), self._operand(P2))
    return self

  def sub(self, P1: Point, P2: Point) -> WeierstrassPoint:
    self.xy = self.group.add(self._operand(P1), self.group.neg(self._operand(P2)))
    return self

  def neg(self, P: Point) -> WeierstrassPoint:
    self.xy = self.group.neg(self._operand(P))
    return self

  def mul(self, s: ModScalar, P: Optional[Point] = None) -> WeierstrassPoint:
    """Set to s * P, or s * G if no point is given."""
    self.xy = self.group.mul(self._scalar(s), self.group.g if P is None else self._operand(P))
    return self

  def marshal_size(self) -> int: return self.group.point_len()

  def marshal_binary(self) -> bytes:
    """ANSI X9.62 uncompressed form 04 || x || y"""
    l = self.group.coord_len()
    if self.xy is None:
      return b"\x04" + bytes(2 * l)
    x, y = self.xy
    return b"\x04" + tobytes(x, l, "big") + tobytes(y, l, "big")

  def unmarshal_binary(self, data: bytes) -> None:
    l = self.group.coord_len()
    if len(data) != 2 * l + 1:
      raise InvalidEncoding(f"{self.group.name} point encoding must be {2 * l + 1} bytes, got {len(data)}")
    if data[0] != 4:
      raise InvalidEncoding(f"Only uncompressed points are supported, got header byte {data[0]:#04x}")
    if not any(data[1:]):
      self.xy = None
      return
    x, y = toint(data[1:1 + l], "big"), toint(data[1 + l:], "big")
    if x >= self.group.p or y >= self.group.p:
      raise PointDecodeFailure(f"{self.group.name} coordinate out of range")
    if not self.group.on_curve(x, y):
      raise PointNotOnCurve(f"Point is not on curve {self.group.name}")
    self.xy = x, y

  def __add__(self, o): return WeierstrassPoint(self.group).add(self, o)
  def __sub__(self, o): return WeierstrassPoint(self.group).sub(self, o)
  def __neg__(self): return WeierstrassPoint(self.group).neg(self)

  def __mul__(self, s):
    if isinstance(s, ModScalar): s = self._scalar(s)
    if not isinstance(s, int): return NotImplemented
    return WeierstrassPoint(self.group, self.group.mul(s, self.xy))

  def __rmul__(self, s): return self * s

  def __eq__(self, other):
    if not isinstance(other, WeierstrassPoint): raise TypeError(f"WeierstrassPoint cannot be compared with {type(other)}")
    return self.equal(other)

  def __hash__(self): return hash(self.xy)
  def __bytes__(self): return self.marshal_binary()
  def __str__(self): return "(0,0)" if self.xy is None else f"({self.xy[0]},{self.xy[1]})"
  def __repr__(self): return f"<{self.group.name} {self}>"
