class InvalidModulus(ValueError):
  """Modulus is zero or negative"""

class NotInvertible(ValueError):
  """No modular inverse exists (operand and modulus are not coprime)"""

class NoValidPoint(ValueError):
  """Message could not be mapped to a curve point within the attempt bound"""

class InvalidParameters(ValueError):
  """Curve parameters are inconsistent (singular curve, bad generator, ...)"""

class CliArgError(ValueError):
  """Invalid CLI argument"""
