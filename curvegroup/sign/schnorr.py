"""
Schnorr signatures over any group.

A signature is R || s with R = r * G for a random r and s = r + c * k, where k
is the secret key and the challenge c = H(R || K || message) for the public
key K = k * G. It verifies when s * G == c * K + R.
"""
from typing import Optional, Tuple

from ..exceptions import InvalidEncoding, SignatureLengthMismatch
from ..group import Group, Point, Scalar
from ..sampling import RandomSource
from ..util import shabytes


def sign(group: Group, secret: Scalar, message: bytes, rand: Optional[RandomSource] = None) -> bytes:
  r = group.scalar().pick(rand)
  Rs = group.point().mul(r).marshal_binary()
  K = group.point().mul(secret)
  c = hash_schnorr(group, Rs, K.marshal_binary(), message)
  s = group.scalar().mul(secret, c)
  s.add(s, r)
  return Rs + s.marshal_binary()


def verify(group: Group, public: Point, message: bytes, signature: bytes) -> bool:
  """
  Check a signature, returning False if it is invalid.

  Malformed signatures (wrong length, undecodable R) are also reported as
  False. Use split_signature to tell the two apart.
  """
  try:
    R, s = split_signature(group, signature)
  except InvalidEncoding:
    return False
  c = hash_schnorr(group, signature[:group.point_len()], public.marshal_binary(), message)
  left = group.point().mul(s)
  right = group.point().mul(c, public)
  right.add(right, R)
  return right.equal(left)


def split_signature(group: Group, signature: bytes) -> Tuple[Point, Scalar]:
  """Decode R and s, raising on malformed signatures"""
  plen, slen = group.point_len(), group.scalar_len()
  if len(signature) != plen + slen:
    raise SignatureLengthMismatch(f"Signature must be {plen + slen} bytes for {group}, got {len(signature)}")
  R = group.point()
  R.unmarshal_binary(signature[:plen])
  s = group.scalar()
  s.unmarshal_binary(signature[plen:])
  return R, s


def hash_schnorr(group: Group, *parts: bytes) -> Scalar:
  """SHA-512 over all parts, decoded as a scalar of the group (reduced mod n)"""
  return group.scalar().set_bytes(shabytes(*parts))
