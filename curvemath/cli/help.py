import sys
from typing import NoReturn

import curvemath

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  mul=f"{C}curvemath {F}mul {D}[{F}-c {N}curve{D}] [{F}--naf {D}|{F} -x{D}]{N} scalar {D}[{N}x y{D}] —{N} scalar multiplication\n",
  add=f"{C}curvemath {F}add {D}[{F}-c {N}curve{D}]{N} x1 y1 x2 y2 {D}—{N} add two points\n",
  map=f"{C}curvemath {F}map {D}[{F}-c {N}curve{D}] [{F}-n {N}attempts{D}] [{F}-s {N}stride{D}]{N} message {D}—{N} message to point\n",
  check=f"{C}curvemath {F}check {D}[{F}-c {N}curve{D}] —{N} validate curve parameters\n",
  bench=f"{C}curvemath {F}bench {D}[{F}-c {N}curve{D}] [{F}-n {N}rounds{D}] —{N} time scalar multiplication\n",
)

usagetext = dict(
  mul=f"""\
Multiply the generator of the curve, or the point (x, y) if given, by the
scalar. Prints the affine coordinates of the result, or INFINITY.

  {F}-c --curve{N} NAME    secp256k1 (default), curve25519 or ed25519
  {F}--naf{N}              Use the non-adjacent form instead of double-and-add
  {F}-x --ladder{N}        Curve25519 only: u coordinate by the Montgomery ladder
""",
  add=f"""\
Add two points given by their affine coordinates. The points are not
checked to be on the curve, but a warning is printed if they are not.
""",
  map=f"""\
Map an integer message to a curve point by trying consecutive x coordinates
starting from message * stride. Fails if none of the attempts is a point.

  {F}-n --attempts{N} N    How many x coordinates to try (default 100)
  {F}-s --stride{N} N      Spacing of candidates per message (default 1)
""",
  check=f"""\
Check that the field modulus looks prime, the curve is not singular and the
generator is on the curve with the stated order. All curves by default.
""",
  bench=f"""\
Time scalar multiplications of the generator with random scalars using each
available method.

  {F}-n --rounds{N} N      Multiplications per method (default 20)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"curvemath {curvemath.__version__} - Modular arithmetic and elliptic curves"

introduction = f"""\
{T}{introduction:78}{N}
 💣  Variable time textbook arithmetic, not for protecting real secrets
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Integers may be given in decimal or as 0x prefixed hexadecimal. Curves:
{', '.join(curvemath.CURVES)}. Use {F}--debug{N} to see tracebacks of errors.
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"curvemath {curvemath.__version__}")
  sys.exit(0)
