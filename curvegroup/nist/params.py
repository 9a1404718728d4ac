from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class CurveParams:
  """Parameters of a short Weierstrass curve y^2 = x^3 + ax + b over GF(p)"""
  name: str
  bit_size: int
  gx: int
  gy: int
  p: int
  b: int
  n: int
  a: Optional[int] = None

  def __post_init__(self):
    # NIST family default a = -3
    if self.a is None: object.__setattr__(self, "a", self.p - 3)
    if not 0 <= self.gx < self.p or not 0 <= self.gy < self.p:
      raise ValueError(f"{self.name}: generator coordinates out of range")

  @classmethod
  def from_hex(cls, name: str, bit_size: int, **values: str) -> CurveParams:
    """Build from hex strings, e.g. as read from a configuration file"""
    return cls(name, bit_size, **{k: int(v, 16) for k, v in values.items()})


P224 = CurveParams.from_hex(
  "P-224", 224,
  p="ffffffffffffffffffffffffffffffff000000000000000000000001",
  b="b4050a850c04b3abf54132565044b0b7d7bfd8ba270b39432355ffb4",
  n="ffffffffffffffffffffffffffff16a2e0b8f03e13dd29455c5c2a3d",
  gx="b70e0cbd6bb4bf7f321390b94a03c1d356c21122343280d6115c1d21",
  gy="bd376388b5f723fb4c22dfe6cd4375a05a07476444d5819985007e34",
)

P256 = CurveParams.from_hex(
  "P-256", 256,
  p="ffffffff00000001000000000000000000000000ffffffffffffffffffffffff",
  b="5ac635d8aa3a93e7b3ebbd55769886bc651d06b0cc53b0f63bce3c3e27d2604b",
  n="ffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551",
  gx="6b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296",
  gy="4fe342e2fe1a7f9b8ee7eb4a7c0f9e162bce33576b315ececbb6406837bf51f5",
)

P384 = CurveParams.from_hex(
  "P-384", 384,
  p="fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffeffffffff0000000000000000ffffffff",
  b="b3312fa7e23ee7e4988e056be3f82d19181d9c6efe8141120314088f5013875ac656398d8a2ed19d2a85c8edd3ec2aef",
  n="ffffffffffffffffffffffffffffffffffffffffffffffffc7634d81f4372ddf581a0db248b0a77aecec196accc52973",
  gx="aa87ca22be8b05378eb1c71ef320ad746e1d3b628ba79b9859f741e082542a385502f25dbf55296c3a545e3872760ab7",
  gy="3617de4a96262c6f5d9e98bf9292dc29f8f41dbd289a147ce9da3113b5f0b8c00a60b1ce1d7e819d7a431d7c90ea0e5f",
)

P521 = CurveParams.from_hex(
  "P-521", 521,
  p="01ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff",
  b="0051953eb9618e1c9a1f929a21a0b68540eea2da725b99b315f3b8b489918ef109e156193951ec7e937b1652c0bd3bb1bf073573df883d2c34f1ef451fd46b503f00",
  n="01fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffa51868783bf2f966b7fcc0148f709a5d03bb5c9b8899c47aebb6fb71e91386409",
  gx="00c6858e06b70404e9cd9e3ecb662395b4429c648139053fb521f828af606b4d3dbaa14b5e77efe75928fe1dc127a2ffa8de3348b3c1856a429bf97e7e31c2e5bd66",
  gy="011839296a789a3bc0045c8a5fb42c7d1bd998f54449579b446817afbd17273e662c97ee72995ef42640c550b9013fad0761353c7086a272c24088be94769fd16650",
)

CURVES: Dict[str, CurveParams] = {c.name: c for c in (P224, P256, P384, P521)}


def get(name: str) -> CurveParams:
  """Look up a named curve, accepting P-256, p256, secp256r1 style names"""
  key = name.upper().replace("SECP", "P-").replace("R1", "").replace("_", "-")
  if not key.startswith("P-"): key = "P-" + key.lstrip("P")
  try:
    return CURVES[key]
  except KeyError:
    raise ValueError(f"Unknown curve {name!r}, available: {', '.join(CURVES)}") from None
