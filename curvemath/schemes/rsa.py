from typing import Tuple

from ..modular import gcd, is_probable_prime, mod_inverse, modpow

# Textbook RSA without padding. The secret key is the prime pair (p, q) and
# the public key is (N, e) with N = p * q.


def derive_public_key(p: int, q: int, e: int) -> Tuple[int, int]:
  """Return (N, e), checking that the factors look prime and that e is usable."""
  if not is_probable_prime(p) or not is_probable_prime(q):
    raise ValueError("RSA factors must be prime")
  if p == q: raise ValueError("RSA factors must be distinct")
  if gcd(e, (p - 1) * (q - 1)) != 1:
    raise ValueError("Public exponent is not coprime with (p-1)(q-1)")
  return p * q, e


def secret_exponent(p: int, q: int, e: int) -> int:
  """d such that e * d = 1 mod (p-1)(q-1)"""
  return mod_inverse(e, (p - 1) * (q - 1))


def encrypt(m: int, N: int, e: int) -> int:
  if not 0 <= m < N: raise ValueError("Message must be in range [0, N)")
  return modpow(m, e, N)


def decrypt(c: int, p: int, q: int, e: int) -> int:
  return modpow(c, secret_exponent(p, q, e), p * q)


def sign(digest: int, p: int, q: int, e: int) -> int:
  """Signature S = digest^d mod N"""
  return modpow(digest, secret_exponent(p, q, e), p * q)


def verify(S: int, N: int, e: int, digest: int) -> bool:
  return modpow(S, e, N) == digest % N
