from typing import Iterable, Tuple

from .exceptions import InvalidModulus, NotInvertible

# Every function here is pure: the modulus is always an explicit argument and
# nothing is cached between calls. Not constant time.


def modpow(base: int, exponent: int, modulus: int) -> int:
  """
  Compute base ** exponent % modulus by square-and-multiply.

  Bits of the exponent are scanned from the most significant one, squaring
  the accumulator on every bit and multiplying by base on set bits. A negative
  exponent is a power of the modular inverse of base.

  :raises InvalidModulus: if modulus <= 0
  :raises NotInvertible: if exponent < 0 and base has no inverse
  """
  if modulus <= 0: raise InvalidModulus(f"Modulus must be positive, got {modulus}")
  if modulus == 1: return 0
  if exponent < 0:
    base, exponent = mod_inverse(base, modulus), -exponent
  base %= modulus
  result = 1
  for n in reversed(range(exponent.bit_length())):
    result = result * result % modulus
    if exponent & 1 << n:
      result = result * base % modulus
  return result


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
  """Return (g, x, y) such that a*x + b*y == g == gcd(a, b)"""
  old_r, r = a, b
  old_x, x = 1, 0
  old_y, y = 0, 1
  while r:
    q = old_r // r
    old_r, r = r, old_r - q * r
    old_x, x = x, old_x - q * x
    old_y, y = y, old_y - q * y
  # Keep the gcd non-negative when the inputs are not
  if old_r < 0: return -old_r, -old_x, -old_y
  return old_r, old_x, old_y


def gcd(a: int, b: int) -> int:
  return extended_gcd(a, b)[0]


def mod_inverse(a: int, modulus: int) -> int:
  """
  Modular inverse x in [0, modulus) such that a * x % modulus == 1.

  :raises InvalidModulus: if modulus <= 0
  :raises NotInvertible: if a and modulus are not coprime
  """
  if modulus <= 0: raise InvalidModulus(f"Modulus must be positive, got {modulus}")
  g, x, _ = extended_gcd(a % modulus, modulus)
  if g != 1: raise NotInvertible(f"{a} is not invertible modulo {modulus} (gcd {g})")
  return x % modulus


# Legendre symbol:
# -  0 if a is zero mod p
# -  1 if a is a non-zero square
# - -1 if a is not a square
# The modulus must be an odd prime for this to mean anything.
def legendre(a: int, p: int) -> int:
  """Legendre symbol of a modulo an odd prime p"""
  s = modpow(a, (p - 1) // 2, p)
  return -1 if s == p - 1 else s


def is_quadratic_residue(a: int, p: int) -> bool:
  """True if a is a square modulo p (zero included)"""
  return a % p == 0 or legendre(a, p) == 1


def sqrt_mod(a: int, p: int) -> int:
  """
  Square root of a modulo an odd prime p.

  Of the two roots the one in [0, (p-1)/2] is returned, so that the result
  is deterministic.

  :raises ValueError: if a is not a square modulo p, or p turns out not to be prime
  """
  a %= p
  if a == 0: return 0
  if legendre(a, p) != 1: raise ValueError(f"{a} is not a square modulo {p}")
  if p % 4 == 3:
    root = modpow(a, (p + 1) // 4, p)
  elif p % 8 == 5:
    # a^((p+3)/8) is a root of either a or -a, in the latter case fix it by
    # multiplying with sqrt(-1) which is 2^((p-1)/4) because 2 is not a square
    root = modpow(a, (p + 3) // 8, p)
    if root * root % p != a:
      root = root * modpow(2, (p - 1) // 4, p) % p
  else:
    root = _tonelli_shanks(a, p)
  # Only reachable with a composite modulus
  if root * root % p != a: raise ValueError(f"No square root of {a} modulo {p}, which is not prime")
  return min(root, p - root)


def _tonelli_shanks(a: int, p: int) -> int:
  # p - 1 = q * 2^s with q odd
  q, s = p - 1, 0
  while q % 2 == 0:
    q //= 2
    s += 1
  z = 2
  while legendre(z, p) != -1:
    z += 1
    if z >= p: raise ValueError(f"No quadratic non-residue modulo {p}, which is not prime")
  m, c, t, r = s, modpow(z, q, p), modpow(a, q, p), modpow(a, (q + 1) // 2, p)
  while t != 1:
    # Least i such that t^(2^i) == 1
    i, t2 = 0, t
    while t2 != 1:
      t2 = t2 * t2 % p
      i += 1
      if i >= m: raise ValueError(f"Square root does not converge modulo {p}, which is not prime")
    b = modpow(c, 1 << m - i - 1, p)
    m, c = i, b * b % p
    t, r = t * c % p, r * b % p
  return r


def is_probable_prime(n: int, bases: Iterable[int] = range(2, 10)) -> bool:
  """Fermat test against a few small bases. Carmichael numbers may pass."""
  if n < 2: return False
  for b in bases:
    if b % n == 0: continue
    if modpow(b, n - 1, n) != 1: return False
  return True
