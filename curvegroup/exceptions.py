class InvalidEncoding(ValueError):
  """Wrong length or header byte on a binary encoding"""

class PointDecodeFailure(InvalidEncoding):
  """The bytes do not correspond to a curve point"""

class PointNotOnCurve(PointDecodeFailure):
  """Coordinates were decoded but do not satisfy the curve equation"""

class InvalidScalarEncoding(InvalidEncoding):
  """Scalar encoding is longer than the group's scalar length"""

class SignatureLengthMismatch(InvalidEncoding):
  """Signature is not exactly pointLen + scalarLen bytes"""

class DataTooLong(ValueError):
  """Embedded data does not fit (or claims not to fit) in a point"""

class SamplingExhausted(RuntimeError):
  """A rejection sampling loop gave up, most likely due to a broken random source"""
