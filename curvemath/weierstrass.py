from __future__ import annotations

from typing import NamedTuple

from . import group
from .group import MAP_ATTEMPTS, point_to_message
from .modular import mod_inverse
from .point import INFINITY, Affine, Point

# Short Weierstrass curve: y2 = x3 + a x + b  (mod p)
# Affine coordinates with an explicit identity. Every function takes the curve
# as an argument, and the curve is a plain immutable value.


class WeierstrassCurve(NamedTuple):
  """Parameters of a short Weierstrass curve. Trusted, not verified on use."""
  name: str
  a: int
  b: int
  p: int
  G: Affine
  n: int  # Order of G (prime group)
  h: int = 1  # Cofactor

  @property
  def order(self) -> int:
    """Order of the full curve group"""
    return self.h * self.n

  def rhs(self, x: int) -> int:
    """Right hand side of the curve equation"""
    return (x * x * x + self.a * x + self.b) % self.p

  def is_on_curve(self, P: Point) -> bool: return is_on_curve(P, self)
  def negate(self, P: Point) -> Point: return negate(P, self)
  def add(self, P: Point, Q: Point) -> Point: return add(P, Q, self)
  def double(self, P: Point) -> Point: return double(P, self)
  def multiply(self, k: int, P: Point) -> Point: return scalar_multiply(k, P, self)

  def map_message_to_point(self, message: int, attempts=MAP_ATTEMPTS, stride=1) -> Affine:
    return map_message_to_point(message, self, attempts, stride)

  def __repr__(self): return f"<WeierstrassCurve {self.name}>"


def is_on_curve(P: Point, curve: WeierstrassCurve) -> bool:
  """The identity is always on the curve, other points must satisfy the curve equation."""
  if P.is_infinity: return True
  x, y = P
  return x < curve.p and y < curve.p and y * y % curve.p == curve.rhs(x)


def negate(P: Point, curve: WeierstrassCurve) -> Point:
  if P.is_infinity: return INFINITY
  return Affine(P.x, -P.y % curve.p)


def add(P: Point, Q: Point, curve: WeierstrassCurve) -> Point:
  """
  Group law in affine coordinates.

  :raises NotInvertible: if a slope denominator is not invertible (bad p or off-curve points)
  """
  if P.is_infinity: return Q
  if Q.is_infinity: return P
  p = curve.p
  # P + (-P), which also covers doubling a point with y = 0
  if P.x == Q.x and (P.y + Q.y) % p == 0: return INFINITY
  if P == Q:
    lam = (3 * P.x * P.x + curve.a) * mod_inverse(2 * P.y, p) % p
  else:
    lam = (Q.y - P.y) * mod_inverse(Q.x - P.x, p) % p
  x3 = (lam * lam - P.x - Q.x) % p
  return Affine(x3, (lam * (P.x - x3) - P.y) % p)


def double(P: Point, curve: WeierstrassCurve) -> Point:
  return add(P, P, curve)


def scalar_multiply(k: int, P: Point, curve: WeierstrassCurve) -> Point:
  """Multiply P by k using double-and-add. Variable time."""
  # Modulo the full group order so that points outside of the prime group work too
  return group.double_and_add(k % curve.order, P, curve)


def scalar_multiply_naf(k: int, P: Point, curve: WeierstrassCurve) -> Point:
  """Same result as scalar_multiply, using the non-adjacent form of k."""
  return group.naf_multiply(k % curve.order, P, curve)


def map_message_to_point(message: int, curve: WeierstrassCurve, attempts=MAP_ATTEMPTS, stride=1) -> Affine:
  """
  Deterministically map an integer to a curve point by trying x = message * stride + j.

  :raises NoValidPoint: if no point is found within the attempts
  """
  return group.find_point(message, curve.p, curve.rhs, attempts, stride)
