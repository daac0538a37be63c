from typing import Tuple

from .. import weierstrass
from ..curves import SECP256K1
from ..point import Affine, Point
from ..util import random_scalar, sha
from ..weierstrass import WeierstrassCurve

# Schnorr signatures on secp256k1. The signature is the nonce point R and
# s = k + e * secret, where e hashes R, the public key and the message.


def derive_verification_key(secret: int, curve: WeierstrassCurve = SECP256K1) -> Point:
  return weierstrass.scalar_multiply(secret % curve.n, curve.G, curve)


def challenge(R: Affine, P: Affine, message: bytes, curve: WeierstrassCurve = SECP256K1) -> int:
  return sha(R.x, P.x, message) % curve.n


def sign(secret: int, message: bytes, curve: WeierstrassCurve = SECP256K1) -> Tuple[Affine, int]:
  P = derive_verification_key(secret, curve)
  k = random_scalar(curve.n)
  R = weierstrass.scalar_multiply(k, curve.G, curve)
  e = challenge(R, P, message, curve)
  return R, (k + e * secret) % curve.n


def verify(P: Point, signature: Tuple[Point, int], message: bytes, curve: WeierstrassCurve = SECP256K1) -> bool:
  """Check that s G == R + e P"""
  R, s = signature
  if not 0 <= s < curve.n: return False
  if P.is_infinity or R.is_infinity: return False
  if not weierstrass.is_on_curve(P, curve) or not weierstrass.is_on_curve(R, curve): return False
  e = challenge(R, P, message, curve)
  lhs = weierstrass.scalar_multiply(s, curve.G, curve)
  return lhs == weierstrass.add(R, weierstrass.scalar_multiply(e, P, curve), curve)
