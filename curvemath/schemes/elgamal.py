from contextlib import suppress
from secrets import randbelow
from typing import NamedTuple, Tuple

from ..curves import Curve
from ..exceptions import NotInvertible
from ..group import MAP_ATTEMPTS, point_to_message
from ..modular import mod_inverse, modpow
from ..point import Point
from ..util import random_scalar


class DLGroup(NamedTuple):
  """Multiplicative group modulo a prime p, with g as the base"""
  p: int
  g: int


# The prime order of Ed25519 with the Ed25519 base point's y as the base
DEFAULT_GROUP = DLGroup(
  p=2**252 + 27742317777372353535851937790883648493,
  g=int.from_bytes(b"\x58" + 31 * b"\x66", "little"),
)

## Discrete logarithm ElGamal


def derive_public_key(secret: int, group: DLGroup = DEFAULT_GROUP) -> int:
  return modpow(group.g, secret, group.p)


def encrypt(public: int, m: int, group: DLGroup = DEFAULT_GROUP) -> Tuple[int, int]:
  """Encrypt 0 < m < p, returning (c1, c2)"""
  p, g = group
  if not 0 < m < p: raise ValueError("Message must be in range (0, p)")
  k = random_scalar(p - 1)
  return modpow(g, k, p), m * modpow(public, k, p) % p


def decrypt(secret: int, c1: int, c2: int, group: DLGroup = DEFAULT_GROUP) -> int:
  # c1^-secret is the inverse of the shared secret public^k
  return c2 * modpow(c1, -secret, group.p) % group.p


def sign(secret: int, digest: int, group: DLGroup = DEFAULT_GROUP) -> Tuple[int, int]:
  """ElGamal signature (s1, s2) of an integer digest"""
  p, g = group
  while True:
    # Try until the ephemeral k is invertible mod p - 1, roughly half of the time
    with suppress(NotInvertible):
      k = 1 + randbelow(p - 2)
      kinv = mod_inverse(k, p - 1)
      s1 = modpow(g, k, p)
      return s1, (digest - secret * s1) * kinv % (p - 1)


def verify(public: int, signature: Tuple[int, int], digest: int, group: DLGroup = DEFAULT_GROUP) -> bool:
  """Check that g^digest == public^s1 * s1^s2 mod p"""
  p, g = group
  s1, s2 = signature
  if not 0 < s1 < p or not 0 <= s2 < p - 1: return False
  return modpow(g, digest, p) == modpow(public, s1, p) * modpow(s1, s2, p) % p


## Elliptic curve ElGamal (either curve model)


def ec_derive_public_key(secret: int, curve: Curve) -> Point:
  return curve.multiply(secret, curve.G)


def ec_encrypt(public: Point, M: Point, curve: Curve) -> Tuple[Point, Point]:
  """Encrypt a message point M, returning (C1, C2) = (k G, M + k public)"""
  k = random_scalar(curve.n)
  return curve.multiply(k, curve.G), curve.add(M, curve.multiply(k, public))


def ec_decrypt(secret: int, C1: Point, C2: Point, curve: Curve) -> Point:
  """Recover M = C2 - secret C1"""
  return curve.add(C2, curve.negate(curve.multiply(secret, C1)))


def ec_encrypt_message(public: Point, message: int, curve: Curve) -> Tuple[Point, Point]:
  """Map an integer to a point and encrypt it. Mapping errors propagate as NoValidPoint."""
  M = curve.map_message_to_point(message, MAP_ATTEMPTS, MAP_ATTEMPTS)
  return ec_encrypt(public, M, curve)


def ec_decrypt_message(secret: int, C1: Point, C2: Point, curve: Curve) -> int:
  return point_to_message(ec_decrypt(secret, C1, C2, curve), MAP_ATTEMPTS)
