from secrets import randbelow, randbits

# Interactive zero-knowledge proof of knowing a square root x of y modulo N.
#
# Each round the prover commits to s = r^2 for a fresh random r, the verifier
# flips a coin, and the prover answers z = r (challenge 0) or z = r x
# (challenge 1). The verifier checks z^2 == s or z^2 == y s. A prover without
# x can prepare for only one of the two challenges, so it gets caught with
# probability 1/2 per round.


class Prover:
  """Holds the secret root x for the public y = x^2 mod N, N = p * q"""

  def __init__(self, p: int, q: int, x: int):
    self.N = p * q
    self.x = x % self.N
    self.y = self.x * self.x % self.N
    self.r = None

  def commit(self) -> int:
    self.r = 1 + randbelow(self.N - 1)
    return self.r * self.r % self.N

  def respond(self, challenge: int) -> int:
    if self.r is None: raise ValueError("Prover must commit before responding")
    r, self.r = self.r, None  # Never reuse r, it would reveal x
    return r if challenge == 0 else r * self.x % self.N


def random_challenge() -> int:
  return randbits(1)


def verify_round(z: int, N: int, commitment: int, y: int, challenge: int) -> bool:
  zz = z * z % N
  if challenge == 0: return zz == commitment
  return zz == y * commitment % N


def convince(prover: Prover, rounds=100, y=None) -> bool:
  """Run the protocol against prover, checking its claim y (default: prover's own)"""
  N, y = prover.N, prover.y if y is None else y
  for _ in range(rounds):
    s = prover.commit()
    c = random_challenge()
    if not verify_round(prover.respond(c), N, s, y, c): return False
  return True
