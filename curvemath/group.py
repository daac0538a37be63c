"""Scalar multiplication and point finding shared by both curve models.

The curve argument is anything with add, double and negate methods taking
and returning points, i.e. WeierstrassCurve or MontgomeryCurve.
"""
from typing import Callable, List

from .exceptions import NoValidPoint
from .modular import is_quadratic_residue, sqrt_mod
from .point import INFINITY, Affine, Point

# Number of consecutive x candidates tried when mapping a message to a point.
# About half of all x are valid, so failure has probability 2^-MAP_ATTEMPTS.
MAP_ATTEMPTS = 100


def double_and_add(k: int, P: Point, curve) -> Point:
  """Multiply P by a non-negative k, scanning bits from the most significant. Not constant time."""
  Q = INFINITY
  for n in reversed(range(k.bit_length())):
    Q = curve.double(Q)
    if k & 1 << n: Q = curve.add(Q, P)
  return Q


def naf(k: int) -> List[int]:
  """Non-adjacent form of k >= 0, least significant digit first, digits -1, 0 or 1."""
  digits = []
  while k:
    if k & 1:
      d = 2 - (k & 3)  # k = 1 mod 4 -> 1, k = 3 mod 4 -> -1
      k -= d
    else:
      d = 0
    digits.append(d)
    k >>= 1
  return digits


def naf_multiply(k: int, P: Point, curve) -> Point:
  """Multiply P by a non-negative k using signed digits (fewer additions on average)"""
  Q = INFINITY
  N = curve.negate(P)
  for d in reversed(naf(k)):
    Q = curve.double(Q)
    if d == 1: Q = curve.add(Q, P)
    elif d == -1: Q = curve.add(Q, N)
  return Q


def find_point(message: int, p: int, rhs: Callable[[int], int], attempts: int, stride: int) -> Affine:
  """
  Find the first x = message * stride + j, 0 <= j < attempts, such that rhs(x) is a square mod p.

  :raises NoValidPoint: if the attempts run out or x does not fit in the field
  """
  if message < 0: raise NoValidPoint(f"Cannot map negative message {message}")
  if stride < 1: raise ValueError(f"Stride must be positive, got {stride}")
  for j in range(attempts):
    x = message * stride + j
    if x >= p: raise NoValidPoint(f"Message {message} does not fit in the field")
    y2 = rhs(x)
    if is_quadratic_residue(y2, p):
      return Affine(x, sqrt_mod(y2, p))
  raise NoValidPoint(f"No curve point found for message {message} in {attempts} attempts")


def point_to_message(P: Point, stride: int) -> int:
  """Recover the message from a mapped point. Only works if it was mapped with stride >= attempts."""
  if P.is_infinity: raise ValueError("The point at infinity does not encode a message")
  return P.x // stride
