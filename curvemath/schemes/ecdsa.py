from typing import Tuple

from .. import weierstrass
from ..curves import SECP256K1
from ..modular import mod_inverse
from ..point import Point
from ..util import random_scalar
from ..weierstrass import WeierstrassCurve

# ECDSA over secp256k1 (or another Weierstrass curve) on integer digests.
# Compatible with standard ECDSA when digest is the big-endian integer of a
# hash no longer than the order n.


def derive_verification_key(secret: int, curve: WeierstrassCurve = SECP256K1) -> Point:
  return weierstrass.scalar_multiply(secret, curve.G, curve)


def sign(secret: int, digest: int, curve: WeierstrassCurve = SECP256K1) -> Tuple[int, int]:
  """Signature (r, s) using a random nonce"""
  n = curve.n
  z = digest % n
  while True:
    k = random_scalar(n)
    r = weierstrass.scalar_multiply(k, curve.G, curve).x % n
    if r == 0: continue
    s = (z + r * secret) * mod_inverse(k, n) % n
    if s: return r, s


def verify(key: Point, signature: Tuple[int, int], digest: int, curve: WeierstrassCurve = SECP256K1) -> bool:
  n = curve.n
  r, s = signature
  if not 0 < r < n or not 0 < s < n: return False
  if key.is_infinity or not weierstrass.is_on_curve(key, curve): return False
  w = mod_inverse(s, n)
  R = weierstrass.add(
    weierstrass.scalar_multiply(digest * w, curve.G, curve),
    weierstrass.scalar_multiply(r * w, key, curve),
    curve,
  )
  return not R.is_infinity and R.x % n == r
