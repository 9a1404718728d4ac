from ..exceptions import InvalidScalarEncoding
from ..scalar import ModScalar
from ..util import toint


class Ed25519Scalar(ModScalar):
  """A scalar modulo the Ed25519 group order, 32 bytes little endian"""
  byteorder = "little"

  def unmarshal_binary(self, data: bytes) -> None:
    # The integer is kept unreduced so that clamped secret keys keep their
    # bits. Arithmetic results and comparisons are modulo n as usual.
    if len(data) > 32:
      raise InvalidScalarEncoding(f"Ed25519 scalar encoding is {len(data)} bytes, expected at most 32")
    self.val = toint(data)
