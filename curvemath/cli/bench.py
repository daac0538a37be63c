import sys
from time import perf_counter

from tqdm import tqdm

from curvemath import edwards, montgomery, weierstrass
from curvemath.curves import CURVES, get_curve
from curvemath.edwards import EdwardsCurve
from curvemath.montgomery import MontgomeryCurve
from curvemath.util import parse_int, random_scalar


def methods(curve):
  """Scalar multiplication functions available on the curve, by name"""
  if isinstance(curve, MontgomeryCurve):
    return {
      "double-and-add": montgomery.scalar_multiply,
      "naf": montgomery.scalar_multiply_naf,
      "ladder": montgomery.x_scalar_multiply,
    }
  if isinstance(curve, EdwardsCurve):
    return {
      "double-and-add": edwards.scalar_multiply,
      "naf": edwards.scalar_multiply_naf,
    }
  return {
    "double-and-add": weierstrass.scalar_multiply,
    "naf": weierstrass.scalar_multiply_naf,
  }


def main_bench(args):
  rounds = parse_int(args.rounds) if args.rounds else 20
  if rounds < 1: raise ValueError("Rounds must be a positive number")
  curves = [get_curve(args.curve)] if args.curve else CURVES.values()
  for curve in curves:
    # Same scalars for every method
    scalars = [random_scalar(curve.n) for _ in range(rounds)]
    for name, mul in methods(curve).items():
      total = 0.0
      with tqdm(scalars, desc=f"{curve.name} {name}", delay=1.0, ncols=78, leave=False, unit="mul") as progress:
        for k in progress:
          t0 = perf_counter()
          mul(k, curve.G, curve)
          total += perf_counter() - t0
      print(f"{curve.name:12} {name:16} {total / rounds * 1e3:8.2f} ms")
  sys.stdout.flush()
