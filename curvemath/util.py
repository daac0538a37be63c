import hashlib
from secrets import randbelow


def clamp(x: int) -> int:
  """Ed25519 and X25519 standard clamping for scalars"""
  # 256 bits 01[x]000, a multiple of the cofactor 8 with the high bit fixed
  return x & (1 << 255) - 8 | 1 << 254


def tobytes(x: int, length=32) -> bytes:
  return x.to_bytes(length, "big")


def sha(*parts) -> int:
  """SHA-256 over the concatenation of the parts (bytes, or ints as 32 bytes), as an integer"""
  h = hashlib.sha256()
  for part in parts:
    h.update(tobytes(part) if isinstance(part, int) else part)
  return int.from_bytes(h.digest(), "big")


def random_scalar(n: int) -> int:
  """Uniformly random integer in [1, n)"""
  return 1 + randbelow(n - 1)


def parse_int(s: str) -> int:
  """Decimal or 0x prefixed hexadecimal integer from a string, optionally signed"""
  s = s.strip().replace("_", "")
  try:
    return int(s, 16) if s.lower().lstrip("+-").startswith("0x") else int(s)
  except ValueError:
    raise ValueError(f"Not an integer: {s!r}")
