from __future__ import annotations

from typing import Optional

from .exceptions import InvalidScalarEncoding
from .group import Point, Scalar
from .sampling import RandomSource, randint
from .util import tobytes, toint


class ModScalar(Scalar):
  """
  A scalar modulo the group order n, stored as a Python integer.

  Subclasses choose the byte order of the fixed-width encoding. Results of
  arithmetic are always fully reduced; the stored value of an unmarshaled
  scalar may be kept as-is by subclasses that need it (see Ed25519Scalar).
  """
  byteorder = "big"

  def __init__(self, group, val: int = 0):
    self.group = group
    self.val = val

  @property
  def n(self) -> int: return self.group.n

  def _new(self, val: int) -> ModScalar:
    return type(self)(self.group, val % self.n)

  def _operand(self, o) -> int:
    if not isinstance(o, type(self)) or o.n != self.n:
      raise TypeError(f"Cannot combine {type(self).__name__} with {o!r}")
    return o.val

  def marshal_size(self) -> int: return self.group.scalar_len()

  def marshal_binary(self) -> bytes:
    return tobytes(self.val, self.marshal_size(), self.byteorder)

  def unmarshal_binary(self, data: bytes) -> None:
    if len(data) > self.marshal_size():
      raise InvalidScalarEncoding(f"Scalar encoding is {len(data)} bytes, expected at most {self.marshal_size()}")
    self.val = toint(data, self.byteorder) % self.n

  def set_bytes(self, data: bytes) -> ModScalar:
    """Set from bytes of any length, reducing modulo n (e.g. from a hash)"""
    self.val = toint(data, self.byteorder) % self.n
    return self

  def set_int(self, val: int) -> ModScalar:
    self.val = val % self.n
    return self

  def equal(self, other: Scalar) -> bool:
    return self.val % self.n == self._operand(other) % self.n

  def set(self, a: Scalar) -> ModScalar:
    # Integers are immutable so copying the value never aliases
    self.val = self._operand(a)
    return self

  def clone(self) -> ModScalar: return type(self)(self.group, self.val)
  def zero(self) -> ModScalar: return self.set_int(0)
  def one(self) -> ModScalar: return self.set_int(1)

  def add(self, a: Scalar, b: Scalar) -> ModScalar:
    return self.set_int(self._operand(a) + self._operand(b))

  def sub(self, a: Scalar, b: Scalar) -> ModScalar:
    return self.set_int(self._operand(a) - self._operand(b))

  def neg(self, a: Scalar) -> ModScalar:
    return self.set_int(-self._operand(a))

  def mul(self, a: Scalar, b: Scalar) -> ModScalar:
    return self.set_int(self._operand(a) * self._operand(b))

  def div(self, a: Scalar, b: Scalar) -> ModScalar:
    """a / b mod n, raises ZeroDivisionError if b is zero"""
    return self.set_int(self._operand(a) * self._inverse(self._operand(b)))

  def inv(self, a: Scalar) -> ModScalar:
    return self.set_int(self._inverse(self._operand(a)))

  def _inverse(self, x: int) -> int:
    if x % self.n == 0: raise ZeroDivisionError("Zero scalar has no inverse")
    return pow(x, -1, self.n)

  def pick(self, rand: Optional[RandomSource] = None) -> ModScalar:
    """Uniformly random non-zero scalar"""
    return self.set_int(randint(self.n, rand))

  # Pythonic operators returning new scalars
  def __add__(self, o): return self._new(self.val + self._operand(o))
  def __sub__(self, o): return self._new(self.val - self._operand(o))
  def __mul__(self, o):
    # scalar * point is handled by the point
    if isinstance(o, Point): return NotImplemented
    return self._new(self.val * self._operand(o))

  def __truediv__(self, o): return self._new(self.val * self._inverse(self._operand(o)))
  def __neg__(self): return self._new(-self.val)

  def __eq__(self, other):
    if not isinstance(other, ModScalar): raise TypeError(f"Cannot compare scalar with {other!r}")
    return self.equal(other)

  def __hash__(self): return self.val % self.n
  def __int__(self): return self.val % self.n
  def __bytes__(self): return self.marshal_binary()
  def __str__(self): return self.marshal_binary().hex()
  def __repr__(self): return f"{type(self).__name__}({self.val % self.n})"
