from curvemath import edwards, montgomery, weierstrass
from curvemath.cli import tty
from curvemath.curves import CURVES, get_curve, validate_parameters
from curvemath.edwards import EdwardsCurve
from curvemath.exceptions import CliArgError
from curvemath.group import MAP_ATTEMPTS
from curvemath.montgomery import MontgomeryCurve
from curvemath.point import INFINITY, Affine
from curvemath.util import parse_int
from curvemath.weierstrass import WeierstrassCurve

modules = {WeierstrassCurve: weierstrass, MontgomeryCurve: montgomery, EdwardsCurve: edwards}


def format_point(P) -> str:
  if P.is_infinity: return "INFINITY\n"
  return f"x = {P.x:#x}\ny = {P.y:#x}\n"


def read_point(curve, x: str, y: str) -> Affine:
  P = Affine(parse_int(x), parse_int(y))
  if not curve.is_on_curve(P):
    tty.warning(f"Warning: {P!r} is not on {curve.name}")
  return P


def main_mul(args):
  curve = get_curve(args.curve or "secp256k1")
  if len(args.params) not in (1, 3):
    raise CliArgError("Expected a scalar and optionally the coordinates x y of a point")
  k = parse_int(args.params[0])
  P = read_point(curve, *args.params[1:]) if len(args.params) == 3 else curve.G
  if args.ladder:
    if not isinstance(curve, MontgomeryCurve): raise CliArgError("The ladder is only available on Montgomery curves")
    u = montgomery.x_scalar_multiply(k, P, curve)
    print("INFINITY" if u is INFINITY else f"x = {u:#x}")
    return
  mod = modules[type(curve)]
  mul = mod.scalar_multiply_naf if args.naf else mod.scalar_multiply
  print(format_point(mul(k, P, curve)), end="")


def main_add(args):
  curve = get_curve(args.curve or "secp256k1")
  if len(args.params) != 4:
    raise CliArgError("Expected the coordinates x1 y1 x2 y2")
  P = read_point(curve, *args.params[:2])
  Q = read_point(curve, *args.params[2:])
  print(format_point(curve.add(P, Q)), end="")


def main_map(args):
  curve = get_curve(args.curve or "secp256k1")
  if len(args.params) != 1:
    raise CliArgError("Expected exactly one message")
  attempts = parse_int(args.attempts) if args.attempts else MAP_ATTEMPTS
  stride = parse_int(args.stride) if args.stride else 1
  if attempts < 1: raise CliArgError("Attempts must be a positive number")
  P = curve.map_message_to_point(parse_int(args.params[0]), attempts, stride)
  print(format_point(P), end="")


def main_check(args):
  if args.params:
    raise CliArgError("Unexpected arguments, use --curve to pick the curve")
  curves = [get_curve(args.curve)] if args.curve else CURVES.values()
  for curve in curves:
    with tty.status(f"Checking {curve.name}... "):
      validate_parameters(curve)
    print(f"{curve.name}: OK")
