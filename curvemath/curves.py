from typing import Dict, Union

from . import edwards, group
from .edwards import EdwardsCurve
from .exceptions import InvalidParameters
from .modular import is_probable_prime, mod_inverse
from .montgomery import MontgomeryCurve
from .point import Affine
from .weierstrass import WeierstrassCurve

Curve = Union[WeierstrassCurve, MontgomeryCurve, EdwardsCurve]

# Bitcoin curve y2 = x3 + 7 (SEC 2)
SECP256K1 = WeierstrassCurve(
  name="secp256k1",
  a=0,
  b=7,
  p=2**256 - 2**32 - 977,
  G=Affine(
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
  ),
  n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
)

# Curve25519 v2 = u3 + 486662 u2 + u (RFC 7748), base point u = 9
CURVE25519 = MontgomeryCurve(
  name="curve25519",
  A=486662,
  B=1,
  p=2**255 - 19,
  G=Affine(9, 14781619447589544791020593568409986887264606134616475288964881837755586237401),
  n=2**252 + 27742317777372353535851937790883648493,
  h=8,
)

# Ed25519 -x2 + y2 = 1 + d x2 y2 (RFC 8032), birationally equivalent to Curve25519.
# The base point has y = 4/5 and a positive (even) x.
_p = CURVE25519.p
_ed25519 = EdwardsCurve(
  name="ed25519",
  a=_p - 1,
  d=-121665 * mod_inverse(121666, _p) % _p,
  p=_p,
  G=None,
  n=CURVE25519.n,
  h=8,
)
ED25519 = _ed25519._replace(G=edwards.from_y(4 * mod_inverse(5, _p) % _p, _ed25519))

CURVES: Dict[str, Curve] = {c.name: c for c in (SECP256K1, CURVE25519, ED25519)}


def get_curve(name: str) -> Curve:
  try:
    return CURVES[name.lower()]
  except KeyError:
    raise ValueError(f"Unknown curve {name!r}, choose one of {', '.join(CURVES)}")


def validate_parameters(curve: Curve) -> None:
  """
  Sanity check curve parameters. Nothing calls this implicitly.

  A Fermat test on p and n, not a primality proof.

  :raises InvalidParameters: on the first problem found
  """
  p = curve.p
  if not is_probable_prime(p): raise InvalidParameters(f"{curve.name}: field modulus is not prime")
  if not is_probable_prime(curve.n): raise InvalidParameters(f"{curve.name}: order of G is not prime")
  if isinstance(curve, WeierstrassCurve):
    singular = (4 * curve.a**3 + 27 * curve.b**2) % p == 0
  elif isinstance(curve, EdwardsCurve):
    singular = curve.a * curve.d * (curve.a - curve.d) % p == 0
  else:
    singular = curve.B * (curve.A**2 - 4) % p == 0
  if singular: raise InvalidParameters(f"{curve.name}: the curve is singular")
  if curve.G.is_infinity or not curve.is_on_curve(curve.G):
    raise InvalidParameters(f"{curve.name}: generator is not on the curve")
  # Without the reduction modulo the order that multiply does
  if not group.double_and_add(curve.n, curve.G, curve).is_infinity:
    raise InvalidParameters(f"{curve.name}: generator does not have order n")
