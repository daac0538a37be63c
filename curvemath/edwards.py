from __future__ import annotations

import hashlib
from functools import lru_cache
from typing import NamedTuple

from . import group
from .exceptions import InvalidParameters
from .group import MAP_ATTEMPTS, point_to_message
from .modular import is_quadratic_residue, mod_inverse, sqrt_mod
from .montgomery import MontgomeryCurve
from .point import INFINITY, Affine, Point
from .util import clamp

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2  (mod p)
# The neutral element is the affine (0, 1). It is accepted as input but always
# returned as INFINITY, so that results compare equal across curve models.
# With a square and d not square the addition law is complete: no branches
# for doubling or for P + (-P).


class EdwardsCurve(NamedTuple):
  """Parameters of a twisted Edwards curve. Trusted, not verified on use."""
  name: str
  a: int
  d: int
  p: int
  G: Affine
  n: int  # Order of G (prime group)
  h: int = 1  # Cofactor

  @property
  def order(self) -> int:
    """Order of the full curve group"""
    return self.h * self.n

  def rhs(self, x: int) -> int:
    """y^2 solved from the curve equation, i.e. (1 - a x2) / (1 - d x2)"""
    p, xx = self.p, x * x
    return (1 - self.a * xx) * mod_inverse(1 - self.d * xx, p) % p

  def is_on_curve(self, P: Point) -> bool: return is_on_curve(P, self)
  def negate(self, P: Point) -> Point: return negate(P, self)
  def add(self, P: Point, Q: Point) -> Point: return add(P, Q, self)
  def double(self, P: Point) -> Point: return double(P, self)
  def multiply(self, k: int, P: Point) -> Point: return scalar_multiply(k, P, self)

  def map_message_to_point(self, message: int, attempts=MAP_ATTEMPTS, stride=1) -> Affine:
    return map_message_to_point(message, self, attempts, stride)

  def __repr__(self): return f"<EdwardsCurve {self.name}>"


def is_on_curve(P: Point, curve: EdwardsCurve) -> bool:
  if P.is_infinity: return True
  x, y = P
  p = curve.p
  xx, yy = x * x, y * y
  return x < p and y < p and (curve.a * xx + yy) % p == (1 + curve.d * xx * yy) % p


def negate(P: Point, curve: EdwardsCurve) -> Point:
  if P.is_infinity: return INFINITY
  return Affine(-P.x % curve.p, P.y)


def add(P: Point, Q: Point, curve: EdwardsCurve) -> Point:
  """
  Complete Edwards addition, also used for doubling.

  :raises NotInvertible: only for off-curve points or bad parameters
  """
  p, a, d = curve.p, curve.a, curve.d
  x1, y1 = (0, 1) if P.is_infinity else P
  x2, y2 = (0, 1) if Q.is_infinity else Q
  t = d * x1 * x2 * y1 * y2 % p
  x3 = (x1 * y2 + y1 * x2) * mod_inverse(1 + t, p) % p
  y3 = (y1 * y2 - a * x1 * x2) * mod_inverse(1 - t, p) % p
  if x3 == 0 and y3 == 1: return INFINITY
  return Affine(x3, y3)


def double(P: Point, curve: EdwardsCurve) -> Point:
  return add(P, P, curve)


def scalar_multiply(k: int, P: Point, curve: EdwardsCurve) -> Point:
  """Multiply P by k using double-and-add. Variable time."""
  return group.double_and_add(k % curve.order, P, curve)


def scalar_multiply_naf(k: int, P: Point, curve: EdwardsCurve) -> Point:
  """Same result as scalar_multiply, using the non-adjacent form of k."""
  return group.naf_multiply(k % curve.order, P, curve)


def map_message_to_point(message: int, curve: EdwardsCurve, attempts=MAP_ATTEMPTS, stride=1) -> Affine:
  """
  Deterministically map an integer to a curve point by trying x = message * stride + j.

  :raises NoValidPoint: if no point is found within the attempts
  """
  return group.find_point(message, curve.p, curve.rhs, attempts, stride)


def from_y(y: int, curve: EdwardsCurve, negative=False) -> Affine:
  """Restore a point from its y coordinate, negative selecting an odd x"""
  p = curve.p
  yy = y * y % p
  x2 = (yy - 1) * mod_inverse(curve.d * yy - curve.a, p) % p
  if not is_quadratic_residue(x2, p): raise ValueError(f"No point with y = {y} on {curve.name}")
  x = sqrt_mod(x2, p)
  return Affine(x if x & 1 == negative else -x % p, y)


## Birational equivalence with a Montgomery curve
# (u, v) = ((1 + y) / (1 - y), c u / x) and back (x, y) = (c u / v, (u - 1) / (u + 1))
# where c2 = 4 / ((a - d) B). The identity maps to the identity and the
# point (0, -1) of order two maps to (0, 0).


@lru_cache(maxsize=None)
def montgomery_scale(curve: EdwardsCurve, target: MontgomeryCurve) -> int:
  """
  The factor c of the maps between curve and target.

  Of the two square roots, the one that takes curve.G to target.G is used.

  :raises InvalidParameters: if the curves are not equivalent this way
  """
  p = curve.p
  inv = mod_inverse(curve.a - curve.d, p)
  if target.p != p or target.A != 2 * (curve.a + curve.d) * inv % p:
    raise InvalidParameters(f"{curve.name} is not birationally equivalent to {target.name}")
  c2 = 4 * inv * mod_inverse(target.B, p) % p
  if not is_quadratic_residue(c2, p):
    raise InvalidParameters(f"{curve.name} maps to a twist of {target.name}")
  c = sqrt_mod(c2, p)
  x, y = curve.G
  u = (1 + y) * mod_inverse(1 - y, p) % p
  v = c * u * mod_inverse(x, p) % p
  if target.G == Affine(u, v): return c
  if target.G == Affine(u, -v % p): return p - c
  raise InvalidParameters(f"Generators of {curve.name} and {target.name} do not correspond")


def to_montgomery(P: Point, curve: EdwardsCurve, target: MontgomeryCurve) -> Point:
  if P.is_infinity: return INFINITY
  p = curve.p
  x, y = P
  if x == 0: return INFINITY if y == 1 else Affine(0, 0)
  c = montgomery_scale(curve, target)
  u = (1 + y) * mod_inverse(1 - y, p) % p
  return Affine(u, c * u * mod_inverse(x, p) % p)


def from_montgomery(P: Point, curve: EdwardsCurve, source: MontgomeryCurve) -> Point:
  if P.is_infinity: return INFINITY
  p = curve.p
  u, v = P
  if u == 0 and v == 0: return Affine(0, p - 1)
  c = montgomery_scale(curve, source)
  x = c * u * mod_inverse(v, p) % p
  y = (u - 1) * mod_inverse(u + 1, p) % p
  return Affine(x, y)


## Ed25519 keys (RFC 8032)


def secret_scalar(seed: bytes) -> int:
  """Clamped secret scalar from a 32-byte Ed25519 seed. Sodium's 64-byte secret keys work too."""
  if len(seed) not in (32, 64): raise ValueError("Invalid length for Ed25519 seed")
  return clamp(int.from_bytes(hashlib.sha512(seed[:32]).digest()[:32], "little"))


def encode(P: Point, curve: EdwardsCurve) -> bytes:
  """Standard 32-byte encoding: y in little endian with the parity of x on the high bit"""
  x, y = (0, 1) if P.is_infinity else P
  return (y | (x & 1) << 255).to_bytes(32, "little")


def decode(b: bytes, curve: EdwardsCurve) -> Point:
  val = int.from_bytes(b, "little")
  y, negative = val & (1 << 255) - 1, bool(val >> 255)
  if y >= curve.p: raise ValueError("Non-canonical point encoding")
  P = from_y(y, curve, negative)
  if P.x == 0 and negative: raise ValueError("Non-canonical point encoding")
  return INFINITY if P == Affine(0, 1) else P
