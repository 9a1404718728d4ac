from __future__ import annotations

from typing import Optional, Tuple

from ..group import Group
from ..sampling import RandomSource
from ..util import bytelen
from . import params
from .params import CurveParams
from .point import WeierstrassPoint
from .scalar import WeierstrassScalar

# Affine coordinates (x, y), None is the point at infinity
Affine = Optional[Tuple[int, int]]


class Weierstrass(Group):
  """
  The group of a short Weierstrass curve y^2 = x^3 + ax + b over GF(p).

  The parameter bundle is immutable and shared by every scalar and point the
  group creates. Named NIST curves are found in curvegroup.nist.params:

    >>> group = Weierstrass(params.P256)
    >>> group = Weierstrass.named("P-256")
  """

  def __init__(self, config: CurveParams):
    self.params = config
    self.name = config.name
    self.bit_size = config.bit_size
    self.p, self.a, self.b, self.n = config.p, config.a, config.b, config.n
    self.g = config.gx, config.gy
    if not self.on_curve(*self.g):
      raise ValueError(f"{self.name}: generator is not on the curve")

  @classmethod
  def named(cls, name: str) -> Weierstrass:
    return cls(params.get(name))

  def coord_len(self) -> int: return bytelen(self.bit_size)
  def scalar_len(self) -> int: return bytelen(self.n.bit_length())
  def scalar(self) -> WeierstrassScalar: return WeierstrassScalar(self)
  # ANSI X9.62: 1 header byte plus 2 coords
  def point_len(self) -> int: return 2 * self.coord_len() + 1
  def point(self) -> WeierstrassPoint: return WeierstrassPoint(self)

  def new_key(self, rand: Optional[RandomSource] = None) -> WeierstrassScalar:
    return self.scalar().pick(rand)

  def rhs(self, x: int) -> int:
    """The right hand side x^3 + ax + b of the curve equation"""
    return (x * x * x + self.a * x + self.b) % self.p

  def on_curve(self, x: int, y: int) -> bool:
    return 0 <= x < self.p and 0 <= y < self.p and y * y % self.p == self.rhs(x)

  def add(self, P: Affine, Q: Affine) -> Affine:
    if P is None: return Q
    if Q is None: return P
    p = self.p
    (x1, y1), (x2, y2) = P, Q
    if x1 == x2:
      # Either P + (-P) or doubling a point with y = 0
      if (y1 + y2) % p == 0: return None
      slope = (3 * x1 * x1 + self.a) * pow(2 * y1, -1, p) % p
    else:
      slope = (y2 - y1) * pow(x2 - x1, -1, p) % p
    x3 = (slope * slope - x1 - x2) % p
    return x3, (slope * (x1 - x3) - y1) % p

  def neg(self, P: Affine) -> Affine:
    return None if P is None else (P[0], -P[1] % self.p)

  def mul(self, s: int, P: Affine) -> Affine:
    if s < 0: return self.mul(-s, self.neg(P))
    Q = None
    while s > 0:
      if s & 1: Q = self.add(Q, P)
      P = self.add(P, P)
      s >>= 1
    return Q

  def __eq__(self, other): return isinstance(other, Weierstrass) and self.params == other.params
  def __hash__(self): return hash(self.params)
