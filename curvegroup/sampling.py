from secrets import token_bytes
from typing import Callable, Iterator, Optional

from .exceptions import SamplingExhausted
from .util import bytelen

# A random source returns the requested number of uniformly random bytes
RandomSource = Callable[[int], bytes]

# Each draw in our rejection loops succeeds with a constant probability (the
# worst is Ed25519 embedding at about 1/16), so hitting this bound means that
# the random source is not random.
MAX_ATTEMPTS = 1000


def source(rand: Optional[RandomSource] = None) -> RandomSource:
  return token_bytes if rand is None else rand

def attempts(what: str) -> Iterator[int]:
  """Iterate over the allowed attempts of a rejection loop, raise when out."""
  yield from range(MAX_ATTEMPTS)
  raise SamplingExhausted(f"Unable to {what} in {MAX_ATTEMPTS} attempts, check the random source")


def bits(bitlen: int, exact: bool = False, rand: Optional[RandomSource] = None) -> bytes:
  """
  Random big-endian bytes holding a value of at most bitlen bits.

  With exact=True the highest bit is forced on so that the value has exactly
  bitlen bits.
  """
  b = bytearray(source(rand)(bytelen(bitlen)))
  highbits = bitlen & 7
  if highbits:
    b[0] &= ~(0xFF << highbits) & 0xFF
  if exact:
    b[0] |= 1 << highbits - 1 if highbits else 0x80
  return bytes(b)

def randint(mod: int, rand: Optional[RandomSource] = None) -> int:
  """Uniformly random integer in range 0 < x < mod (zero is rejected too)."""
  bitlen = mod.bit_length()
  for _ in attempts("choose a random integer"):
    x = int.from_bytes(bits(bitlen, False, rand), "big")
    if 0 < x < mod:
      return x
