# Plain Python modular arithmetic and elliptic curve groups (secp256k1,
# Curve25519 and Ed25519), with a few textbook public key schemes built on top.

# Not constant time, nothing is zeroed after use and key generation is not
# production grade. Every operation is a pure function of its arguments: the
# modulus or the curve is always passed explicitly.

# Public symbols are imported here. Lower case are functions or integers,
# upper case are points and curves.

from importlib.metadata import PackageNotFoundError, version

from . import edwards, montgomery, weierstrass
from .curves import CURVE25519, CURVES, ED25519, SECP256K1, get_curve, validate_parameters
from .edwards import EdwardsCurve
from .exceptions import InvalidModulus, InvalidParameters, NotInvertible, NoValidPoint
from .group import MAP_ATTEMPTS, naf, point_to_message
from .modular import extended_gcd, gcd, is_probable_prime, is_quadratic_residue, legendre, mod_inverse, modpow, sqrt_mod
from .montgomery import MontgomeryCurve
from .point import INFINITY, Affine, Infinity, Point
from .weierstrass import WeierstrassCurve

try:
  __version__ = version("curvemath")
except PackageNotFoundError:
  __version__ = "0.0.0"
