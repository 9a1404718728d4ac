import hashlib
from typing import Optional


def toint(b: bytes, byteorder: str = "little") -> int:
  return int.from_bytes(b, byteorder)

def tobytes(x: int, length: int, byteorder: str = "little") -> bytes:
  return x.to_bytes(length, byteorder)

def bytelen(bits: int) -> int:
  """Number of bytes needed to hold the given number of bits"""
  return bits + 7 >> 3

def shabytes(*parts: bytes) -> bytes:
  """SHA-512 over the concatenation of all parts"""
  h = hashlib.sha512()
  for part in parts:
    h.update(part)
  return h.digest()


def is_square(x: int, p: int) -> bool:
  """Euler's criterion (zero counts as a square)"""
  x %= p
  return x == 0 or pow(x, (p - 1) // 2, p) == 1

def sqrt_mod(x: int, p: int) -> Optional[int]:
  """
  Square root modulo an odd prime p, or None if x is not a square.

  The root returned is not normalized in any way; the caller picks the sign.
  """
  x %= p
  if x == 0: return 0
  if not is_square(x, p): return None
  if p % 4 == 3:
    return pow(x, (p + 1) // 4, p)
  if p % 8 == 5:
    # Atkin's variant: either r or r * sqrt(-1) is the root
    r = pow(x, (p + 3) // 8, p)
    if r * r % p != x: r = r * pow(2, (p - 1) // 4, p) % p
    return r
  # Tonelli-Shanks for p = 1 mod 8 (e.g. P-224)
  q, s = p - 1, 0
  while not q & 1:
    q >>= 1
    s += 1
  z = 2
  while is_square(z, p): z += 1
  m, c, t, r = s, pow(z, q, p), pow(x, q, p), pow(x, (q + 1) // 2, p)
  while t != 1:
    i, t2 = 0, t
    while t2 != 1:
      t2 = t2 * t2 % p
      i += 1
    b = pow(c, 1 << m - i - 1, p)
    m, c = i, b * b % p
    t, r = t * c % p, r * b % p
  return r
