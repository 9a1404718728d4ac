from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .sampling import RandomSource

# The abstract group contract shared by all curve families. Arithmetic methods
# compute into the receiver and return it, so that x.add(a, b) sets x = a + b:
#
#   s = group.scalar().pick()
#   P = group.point().mul(s)          # s * G
#   Q = group.point().add(P, P)       # 2 * s * G
#
# The Python operators (+, -, *, ==) are also available and return new values.


class Group(ABC):
  """A cyclic group of prime order n, e.g. an elliptic curve subgroup"""
  name: str

  @abstractmethod
  def scalar_len(self) -> int:
    """Length of a marshaled scalar in bytes"""

  @abstractmethod
  def scalar(self) -> Scalar:
    """A new scalar, initialized to zero"""

  @abstractmethod
  def point_len(self) -> int:
    """Length of a marshaled point in bytes"""

  @abstractmethod
  def point(self) -> Point:
    """A new point, initialized to the identity element"""

  @abstractmethod
  def new_key(self) -> Scalar:
    """A new random secret key"""

  def __str__(self): return self.name
  def __repr__(self): return f"<{type(self).__name__} {self.name}>"


class Scalar(ABC):
  """An integer modulo the group order, mutated in place by arithmetic"""

  @abstractmethod
  def marshal_binary(self) -> bytes: ...
  @abstractmethod
  def unmarshal_binary(self, data: bytes) -> None: ...
  @abstractmethod
  def set_bytes(self, data: bytes) -> Scalar: ...
  @abstractmethod
  def equal(self, other: Scalar) -> bool: ...
  @abstractmethod
  def set(self, a: Scalar) -> Scalar: ...
  @abstractmethod
  def clone(self) -> Scalar: ...
  @abstractmethod
  def zero(self) -> Scalar: ...
  @abstractmethod
  def one(self) -> Scalar: ...
  @abstractmethod
  def add(self, a: Scalar, b: Scalar) -> Scalar: ...
  @abstractmethod
  def sub(self, a: Scalar, b: Scalar) -> Scalar: ...
  @abstractmethod
  def neg(self, a: Scalar) -> Scalar: ...
  @abstractmethod
  def mul(self, a: Scalar, b: Scalar) -> Scalar: ...
  @abstractmethod
  def div(self, a: Scalar, b: Scalar) -> Scalar: ...
  @abstractmethod
  def inv(self, a: Scalar) -> Scalar: ...
  @abstractmethod
  def pick(self, rand: Optional[RandomSource] = None) -> Scalar: ...


class Point(ABC):
  """A group element, mutated in place by arithmetic"""

  @abstractmethod
  def equal(self, other: Point) -> bool: ...
  @abstractmethod
  def null(self) -> Point: ...
  @abstractmethod
  def base(self) -> Point: ...
  @abstractmethod
  def pick(self, rand: Optional[RandomSource] = None) -> Point: ...
  @abstractmethod
  def set(self, p: Point) -> Point: ...
  @abstractmethod
  def clone(self) -> Point: ...
  @abstractmethod
  def embed_len(self) -> int: ...
  @abstractmethod
  def embed(self, data: bytes, rand: Optional[RandomSource] = None) -> Point: ...
  @abstractmethod
  def data(self) -> bytes: ...
  @abstractmethod
  def add(self, p1: Point, p2: Point) -> Point: ...
  @abstractmethod
  def sub(self, p1: Point, p2: Point) -> Point: ...
  @abstractmethod
  def neg(self, p: Point) -> Point: ...
  @abstractmethod
  def mul(self, s: Scalar, p: Optional[Point] = None) -> Point: ...
  @abstractmethod
  def marshal_binary(self) -> bytes: ...
  @abstractmethod
  def unmarshal_binary(self, data: bytes) -> None: ...
