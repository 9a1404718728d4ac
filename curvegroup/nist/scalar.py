from ..scalar import ModScalar


class WeierstrassScalar(ModScalar):
  """A scalar modulo the curve order n, big endian as in SEC 1"""
  byteorder = "big"
