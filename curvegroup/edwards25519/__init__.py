# Ed25519 group arithmetic in plain Python.
# https://datatracker.ietf.org/doc/html/rfc8032

# Not constant time and not zeroing buffers after use. Points of the full curve
# (including low order components) can be decoded; only the embedding and
# clamped keys guarantee prime order subgroup membership.

from .curve import Ed25519, clamp, secret_scalar
from .point import Ed25519Point
from .scalar import Ed25519Scalar
