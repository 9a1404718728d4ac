from hashlib import sha512
from secrets import token_bytes

import nacl.bindings as sodium
import pytest

from curvegroup import Ed25519, Weierstrass
from curvegroup.edwards25519 import Ed25519Point, Ed25519Scalar, clamp, secret_scalar
from curvegroup.edwards25519.point import n, p
from curvegroup.exceptions import DataTooLong, InvalidEncoding, InvalidScalarEncoding, PointDecodeFailure
from curvegroup.nist import P256

group = Ed25519()

# RFC 8032 section 7.1, TEST 1
RFC_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC_PK = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")


def test_group():
  assert str(group) == "Ed25519"
  assert group.scalar_len() == 32
  assert group.point_len() == 32
  assert group == Ed25519()
  assert isinstance(group.scalar(), Ed25519Scalar)
  assert isinstance(group.point(), Ed25519Point)
  assert group.scalar().equal(group.scalar().zero())
  assert group.point().equal(group.point().null())


def test_scalar_arithmetic():
  a = group.scalar().pick()
  b = group.scalar().pick()
  one = group.scalar().one()
  zero = group.scalar().zero()
  assert group.scalar().add(a, group.scalar().neg(a)) == zero
  assert group.scalar().sub(a, a) == zero
  assert group.scalar().mul(a, one) == a
  assert group.scalar().div(group.scalar().mul(a, b), b) == a
  assert group.scalar().mul(a, group.scalar().inv(a)) == one
  assert a + b == b + a
  assert (a + b) - b == a
  assert a * b / b == a
  assert -(-a) == a
  assert int(group.scalar().set_int(n + 5)) == 5
  with pytest.raises(ZeroDivisionError):
    group.scalar().inv(zero)
  with pytest.raises(TypeError):
    a == 1


def test_scalar_chaining():
  a = group.scalar().set_int(3)
  b = group.scalar().set_int(4)
  x = group.scalar()
  assert x.add(a, b) is x
  assert int(x) == 7
  # The receiver may also be an operand
  x.mul(x, x)
  assert int(x) == 49


def test_scalar_value_semantics():
  a = group.scalar().set_int(10)
  b = group.scalar().set(a)
  c = a.clone()
  a.add(a, group.scalar().one())
  assert int(a) == 11
  assert int(b) == 10
  assert int(c) == 10


def test_scalar_encoding():
  s = group.scalar().pick()
  b = s.marshal_binary()
  assert len(b) == 32
  assert int.from_bytes(b, "little") == int(s)
  t = group.scalar()
  t.unmarshal_binary(b)
  assert t == s
  assert bytes(group.scalar().one()) == b"\x01" + bytes(31)

  # Unreduced values are kept as they are but compare modulo n
  t.unmarshal_binary(b"\xff" * 32)
  assert t.marshal_binary() == b"\xff" * 32
  assert t == group.scalar().set_int(2**256 - 1)

  with pytest.raises(InvalidScalarEncoding):
    t.unmarshal_binary(bytes(33))


def test_scalar_set_bytes():
  h = sha512(b"hello").digest()
  s = group.scalar().set_bytes(h)
  assert int(s) == int.from_bytes(h, "little") % n


def test_base_point():
  G = group.point().base()
  assert G.marshal_binary() == bytes.fromhex("58" + 31 * "66")
  assert str(group.point().null()) == "01" + 31 * "00"
  assert group.point().mul(group.scalar().set_int(n)).equal(group.point())


def test_point_roundtrip():
  for P in (group.point(), group.point().base(), group.point().pick()):
    Q = group.point()
    Q.unmarshal_binary(P.marshal_binary())
    assert Q == P


def test_group_axioms():
  a = group.scalar().pick()
  b = group.scalar().pick()
  P = group.point().pick()
  aP = group.point().mul(a, P)
  bP = group.point().mul(b, P)
  assert group.point().mul(group.scalar().add(a, b), P) == group.point().add(aP, bP)
  assert group.point().mul(a, group.point().mul(b, P)) == group.point().mul(group.scalar().mul(a, b), P)
  assert group.point().add(P, group.point().neg(P)) == group.point()
  assert group.point().sub(P, P) == group.point()
  assert group.point().add(P, group.point()) == P
  # Operators agree with the methods
  assert a * P + b * P == (a + b) * P
  assert P - P == group.point()
  assert 2 * P == P + P
  assert -P + P == group.point()


def test_point_value_semantics():
  G = group.point().base()
  P = group.point().set(G)
  Q = G.clone()
  G.add(G, G)
  assert P == Q == group.point().base()
  assert G != P


def test_point_decoding_errors():
  P = group.point()
  with pytest.raises(InvalidEncoding):
    P.unmarshal_binary(bytes(31))
  # y >= p
  for y in (p, p + 1, 2**255 - 1):
    with pytest.raises(PointDecodeFailure) as exc:
      P.unmarshal_binary(y.to_bytes(32, "little"))
    assert "out of range" in str(exc.value)
  # y < p but x^2 is not a square
  with pytest.raises(PointDecodeFailure) as exc:
    P.unmarshal_binary((2).to_bytes(32, "little"))
  assert "Not a curve point on Ed25519" == str(exc.value)
  # x = 0 with the sign bit set is not a canonical encoding
  with pytest.raises(PointDecodeFailure):
    P.unmarshal_binary(b"\x01" + bytes(30) + b"\x80")
  with pytest.raises(TypeError):
    P == 1
  with pytest.raises(TypeError):
    P.add(P, Weierstrass(P256).point())
  # Scalars of another group
  with pytest.raises(TypeError):
    P.mul(Weierstrass(P256).scalar().one())
  with pytest.raises(TypeError):
    Weierstrass(P256).scalar().one() * group.point().base()
  with pytest.raises(TypeError):
    P.mul(Weierstrass(P256).scalar().one(), group.point().base())


def test_low_order_points():
  # y = 0 gives a point of order 4, y = -1 one of order 2
  T4 = group.point()
  T4.unmarshal_binary(bytes(32))
  T2 = group.point()
  T2.unmarshal_binary((p - 1).to_bytes(32, "little"))
  assert 2 * T4 == T2
  assert 2 * T2 == group.point()
  assert T4 != group.point()
  # Clamped keys clear the low order component, reduced scalars do not
  k = group.new_key()
  G = group.point().base()
  assert k * (G + T4) == k * G
  r = group.scalar().set_int(int(k) | 1)
  assert r * (G + T4) != r * G


def test_embed():
  P = group.point().embed(bytes([1, 2, 3]))
  assert P.data() == bytes([1, 2, 3])
  assert group.point().mul(group.scalar().set_int(n), P) == group.point()

  for i in range(10):
    data = token_bytes(i * 3 % 29 + 1)
    P = group.point().embed(data)
    assert P.data() == data
    Q = group.point()
    Q.unmarshal_binary(P.marshal_binary())
    assert Q.data() == data

  assert group.point().embed_len() == 29
  group.point().embed(bytes(29))
  with pytest.raises(DataTooLong):
    group.point().embed(bytes(30))

  # The base point y has 0x58 as the low byte, too long for a length
  with pytest.raises(DataTooLong):
    group.point().base().data()


def test_pick():
  for i in range(5):
    P = group.point().pick()
    assert P != group.point()
    assert n * P == group.point()


def test_embed_with_given_source():
  draws = []
  def rand(size):
    b = token_bytes(size)
    draws.append(b)
    return b
  P = group.point().embed(b"abc", rand)
  assert P.data() == b"abc"
  assert all(len(b) == 32 for b in draws)


def test_new_key_clamping():
  for i in range(10):
    b = group.new_key().marshal_binary()
    assert b[0] & 7 == 0
    assert b[31] & 0x80 == 0
    assert b[31] & 0x40
  seed = token_bytes(32)
  k = group.new_key(lambda size: seed)
  assert k.marshal_binary() == secret_scalar(seed).to_bytes(32, "little")
  assert clamp(2**256 - 1) == 2**255 - 8


def test_rfc8032_public_key():
  k = group.new_key(lambda size: RFC_SEED)
  assert group.point().mul(k).marshal_binary() == RFC_PK
  with pytest.raises(ValueError):
    secret_scalar(RFC_SEED[:31])


def test_vs_sodium():
  edpk, edsk = sodium.crypto_sign_keypair()
  k = secret_scalar(edsk[:32])
  assert bytes(k * group.point().base()).hex() == edpk.hex()

  s = group.scalar().pick()
  P = group.point().mul(s)
  assert sodium.crypto_scalarmult_ed25519_base_noclamp(s.marshal_binary()) == P.marshal_binary()
  assert sodium.crypto_core_ed25519_is_valid_point(group.point().pick().marshal_binary())


def test_hashmap():
  G = group.point().base()
  assert len({G, G.clone(), G + group.point()}) == 1
  assert len({group.scalar().set_int(i % 3) for i in range(10)}) == 3
