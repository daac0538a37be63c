from __future__ import annotations

from typing import NamedTuple, Union

from . import group
from .group import MAP_ATTEMPTS, point_to_message
from .modular import mod_inverse
from .point import INFINITY, Affine, Infinity, Point

# Montgomery curve: B v2 = u3 + A u2 + u  (mod p)
# Points are (x, y) = (u, v) in affine coordinates with an explicit identity.
# Unlike Edwards forms, addition here is not complete: the identity, P + (-P)
# and doubling all need their own branches.


class MontgomeryCurve(NamedTuple):
  """Parameters of a Montgomery curve. Trusted, not verified on use."""
  name: str
  A: int
  B: int
  p: int
  G: Affine
  n: int  # Order of G (prime group)
  h: int = 1  # Cofactor

  @property
  def order(self) -> int:
    """Order of the full curve group"""
    return self.h * self.n

  def rhs(self, x: int) -> int:
    """y^2 from the curve equation, i.e. (x3 + A x2 + x) / B"""
    r = (x * x * x + self.A * x * x + x) % self.p
    return r if self.B == 1 else r * mod_inverse(self.B, self.p) % self.p

  def is_on_curve(self, P: Point) -> bool: return is_on_curve(P, self)
  def negate(self, P: Point) -> Point: return negate(P, self)
  def add(self, P: Point, Q: Point) -> Point: return add(P, Q, self)
  def double(self, P: Point) -> Point: return double(P, self)
  def multiply(self, k: int, P: Point) -> Point: return scalar_multiply(k, P, self)

  def map_message_to_point(self, message: int, attempts=MAP_ATTEMPTS, stride=1) -> Affine:
    return map_message_to_point(message, self, attempts, stride)

  def __repr__(self): return f"<MontgomeryCurve {self.name}>"


def is_on_curve(P: Point, curve: MontgomeryCurve) -> bool:
  if P.is_infinity: return True
  x, y = P
  p = curve.p
  return x < p and y < p and curve.B * y * y % p == (x * x * x + curve.A * x * x + x) % p


def negate(P: Point, curve: MontgomeryCurve) -> Point:
  if P.is_infinity: return INFINITY
  return Affine(P.x, -P.y % curve.p)


def add(P: Point, Q: Point, curve: MontgomeryCurve) -> Point:
  """
  Group law in affine coordinates.

  :raises NotInvertible: if a slope denominator is not invertible (bad p or off-curve points)
  """
  if P.is_infinity: return Q
  if Q.is_infinity: return P
  p, A, B = curve.p, curve.A, curve.B
  # P + (-P), including the low order points with y = 0 such as (0, 0)
  if P.x == Q.x and (P.y + Q.y) % p == 0: return INFINITY
  if P == Q:
    lam = (3 * P.x * P.x + 2 * A * P.x + 1) * mod_inverse(2 * B * P.y, p) % p
  else:
    lam = (Q.y - P.y) * mod_inverse(Q.x - P.x, p) % p
  x3 = (B * lam * lam - A - P.x - Q.x) % p
  return Affine(x3, (lam * (P.x - x3) - P.y) % p)


def double(P: Point, curve: MontgomeryCurve) -> Point:
  return add(P, P, curve)


def scalar_multiply(k: int, P: Point, curve: MontgomeryCurve) -> Point:
  """Multiply P by k using double-and-add. Variable time."""
  # Modulo h * n rather than n to support points outside of the prime group
  return group.double_and_add(k % curve.order, P, curve)


def scalar_multiply_naf(k: int, P: Point, curve: MontgomeryCurve) -> Point:
  """Same result as scalar_multiply, using the non-adjacent form of k."""
  return group.naf_multiply(k % curve.order, P, curve)


def x_scalar_multiply(k: int, u: Union[int, Point], curve: MontgomeryCurve) -> Union[int, Infinity]:
  """
  Multiply a point given by its u (x) coordinate, returning the u coordinate of the result.

  Uses the Montgomery ladder, so that v is never needed. The sign of v is lost,
  so k * P and k * (-P) give the same result. Returns INFINITY for the identity.
  """
  if isinstance(u, Point):
    if u.is_infinity: return INFINITY
    u = u.x
  p = curve.p
  k %= curve.order
  # The differential addition breaks down with the order two point u = 0
  if u % p == 0: return 0 if k & 1 else INFINITY
  a24 = (curve.A + 2) * mod_inverse(4, p) % p
  # In projective coordinates, to avoid divisions: u = X / Z
  x2, z2 = 1, 0  # "zero" point
  x3, z3 = u, 1  # "one" point
  swap = False
  for n in reversed(range(k.bit_length())):
    bit = bool(k & 1 << n)
    swap ^= bit
    if swap:
      x2, x3 = x3, x2
      z2, z3 = z3, z2
    swap = bit  # anticipates one last swap after the loop

    # Ladder step: replaces (P2, P3) by (P2*2, P2+P3) with differential addition
    a, b = (x2 + z2) % p, (x2 - z2) % p
    aa, bb = a * a % p, b * b % p
    da = a * (x3 - z3) % p
    db = b * (x3 + z3) % p
    e = (aa - bb) % p
    x3, z3 = (da + db)**2 % p, (da - db)**2 * u % p
    x2, z2 = aa * bb % p, (bb + a24 * e) * e % p

  # Last swap is necessary to compensate for the xor trick
  if swap:
    x2, z2 = x3, z3

  # Normalise the coordinates: u = X / Z
  if z2 == 0: return INFINITY
  return x2 * mod_inverse(z2, p) % p


def map_message_to_point(message: int, curve: MontgomeryCurve, attempts=MAP_ATTEMPTS, stride=1) -> Affine:
  """
  Deterministically map an integer to a curve point, needed before EC-ElGamal encryption.

  The message is used as a candidate x coordinate, incremented until x3 + A x2 + x
  (divided by B) is a quadratic residue. Of the two square roots the smaller is used.
  A stride > 1 spaces out the candidates of different messages, and when it is at
  least the number of attempts, point_to_message(P, stride) recovers the message.

  :raises NoValidPoint: if no point is found within the attempts
  """
  return group.find_point(message, curve.p, curve.rhs, attempts, stride)
