from secrets import randbelow, token_bytes

import nacl.bindings as sodium
import pytest

from curvemath import CURVE25519, INFINITY, Affine, MontgomeryCurve, group, montgomery
from curvemath.exceptions import NoValidPoint
from curvemath.modular import legendre
from curvemath.montgomery import (
  add, double, is_on_curve, map_message_to_point, negate, point_to_message, scalar_multiply, scalar_multiply_naf,
  x_scalar_multiply
)
from curvemath.util import clamp

G = CURVE25519.G
n = CURVE25519.n
p = CURVE25519.p


def toy_curve(p, B):
  """Small Montgomery curve with A^2 - 4 not square, so (0, 0) is the only point with y = 0"""
  A = next(A for A in range(3, p) if legendre(A * A - 4, p) == -1)
  points = [Affine(x, y) for x in range(p) for y in range(p) if (B * y * y - x**3 - A * x * x - x) % p == 0]
  # The group order is the number of affine points plus INFINITY, use it with cofactor 1
  curve = MontgomeryCurve(f"toy{p}", A=A, B=B, p=p, G=points[-1], n=len(points) + 1)
  return curve, points


def naive_multiply(k, P, curve):
  Q = INFINITY
  for _ in range(k):
    Q = add(Q, P, curve)
  return Q


@pytest.mark.parametrize("p, B", [(97, 1), (101, 1), (103, 3)])
def test_toy_curves(p, B):
  curve, points = toy_curve(p, B)
  N = curve.n
  for P in points:
    assert is_on_curve(P, curve)
    assert add(P, negate(P, curve), curve) == INFINITY
    assert is_on_curve(double(P, curve), curve)
  # Lagrange: every point times the group order is the identity
  for P in points[::5]:
    assert naive_multiply(N, P, curve) == INFINITY
  P = points[len(points) // 2]
  for k in range(N + 3):
    Q = scalar_multiply(k, P, curve)
    assert Q == naive_multiply(k % N, P, curve)
    assert scalar_multiply_naf(k, P, curve) == Q
    assert x_scalar_multiply(k, P, curve) == (INFINITY if Q.is_infinity else Q.x)


def test_curve25519_generator():
  assert is_on_curve(G, CURVE25519)
  assert not is_on_curve(Affine(G.x, G.y + 1), CURVE25519)
  # Generator has order n, although the curve has cofactor 8
  assert scalar_multiply(n, G, CURVE25519) == INFINITY
  assert scalar_multiply(n + 1, G, CURVE25519) == G
  assert scalar_multiply(2, G, CURVE25519) == add(G, G, CURVE25519)
  assert scalar_multiply(0, G, CURVE25519) == INFINITY
  assert add(G, INFINITY, CURVE25519) == G
  assert add(INFINITY, G, CURVE25519) == G
  assert add(G, Affine(G.x, p - G.y), CURVE25519) == INFINITY


def test_low_order_point():
  # (0, 0) is the point of order two
  T = Affine(0, 0)
  assert is_on_curve(T, CURVE25519)
  assert add(T, T, CURVE25519) == INFINITY
  assert scalar_multiply(3, T, CURVE25519) == T
  assert scalar_multiply(4, T, CURVE25519) == INFINITY
  assert x_scalar_multiply(3, 0, CURVE25519) == 0
  assert x_scalar_multiply(4, 0, CURVE25519) == INFINITY


def test_distributive():
  a, b = randbelow(n), randbelow(n)
  aG = scalar_multiply(a, G, CURVE25519)
  bG = scalar_multiply(b, G, CURVE25519)
  assert scalar_multiply(a + b, G, CURVE25519) == add(aG, bG, CURVE25519)
  assert is_on_curve(aG, CURVE25519)
  assert scalar_multiply_naf(a, G, CURVE25519) == aG


def test_ladder():
  assert x_scalar_multiply(0, G, CURVE25519) == INFINITY
  assert x_scalar_multiply(1, G, CURVE25519) == 9
  assert x_scalar_multiply(5, INFINITY, CURVE25519) == INFINITY
  for _ in range(3):
    k = randbelow(n)
    assert x_scalar_multiply(k, 9, CURVE25519) == scalar_multiply(k, G, CURVE25519).x
  # The sign of v does not matter
  assert x_scalar_multiply(7, negate(G, CURVE25519), CURVE25519) == x_scalar_multiply(7, G, CURVE25519)


def test_vs_sodium():
  for _ in range(3):
    sk = token_bytes(32)
    pk = sodium.crypto_scalarmult_base(sk)
    k = clamp(int.from_bytes(sk, "little"))
    u = int.from_bytes(pk, "little")
    assert x_scalar_multiply(k, 9, CURVE25519) == u
    assert scalar_multiply(k, G, CURVE25519).x == u

  # Diffie-Hellman against sodium with our own public key
  sk1, sk2 = token_bytes(32), token_bytes(32)
  k1 = clamp(int.from_bytes(sk1, "little"))
  P1 = scalar_multiply(k1, G, CURVE25519)
  shared = sodium.crypto_scalarmult(sk2, P1.x.to_bytes(32, "little"))
  pk2 = int.from_bytes(sodium.crypto_scalarmult_base(sk2), "little")
  assert x_scalar_multiply(k1, pk2, CURVE25519) == int.from_bytes(shared, "little")


def test_map_message_to_point():
  for m in (0, 1, 9, 2**128, 1234567):
    P = map_message_to_point(m, CURVE25519)
    assert P == map_message_to_point(m, CURVE25519)
    assert P == CURVE25519.map_message_to_point(m)
    assert is_on_curve(P, CURVE25519)
    assert m <= P.x < m + 100
  # 9 is the generator itself with the smaller root
  assert map_message_to_point(9, CURVE25519) == Affine(9, min(G.y, p - G.y))

  P = map_message_to_point(31337, CURVE25519, stride=100)
  assert point_to_message(P, 100) == 31337

  # Mapped points need not be in the prime group, but the full group order always works
  assert group.double_and_add(CURVE25519.order, P, CURVE25519) == INFINITY


def test_map_message_failures():
  curve, points = toy_curve(97, 1)
  valid = {P.x for P in points}
  x = next(x for x in range(97) if x not in valid)
  with pytest.raises(NoValidPoint):
    map_message_to_point(x, curve, attempts=1)
  with pytest.raises(NoValidPoint):
    map_message_to_point(x, curve, attempts=0)
  with pytest.raises(NoValidPoint) as exc:
    map_message_to_point(p, CURVE25519)
  assert "does not fit" in str(exc.value)


def test_methods():
  assert CURVE25519.add(G, G) == montgomery.double(G, CURVE25519)
  assert CURVE25519.multiply(3, G) == add(G, double(G, CURVE25519), CURVE25519)
  assert CURVE25519.order == 8 * n
  assert CURVE25519.rhs(9) == G.y**2 % p
  assert repr(CURVE25519) == "<MontgomeryCurve curve25519>"
