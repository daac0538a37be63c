from __future__ import annotations

from typing import Iterator

# Points are plain values that know nothing about the curve they belong to.
# The identity is its own variant rather than a sentinel coordinate pair,
# because (0, 0) is a real point of order two on Curve25519.


class Point:
  """A curve element: either Affine(x, y) or INFINITY"""
  __slots__ = ()
  is_infinity = False

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")


class Affine(Point):
  """A point in affine coordinates, x and y in [0, p)"""
  __slots__ = ("x", "y")
  x: int
  y: int

  def __init__(self, x: int, y: int):
    if x < 0 or y < 0: raise ValueError(f"Point coordinates must be non-negative, got ({x}, {y})")
    object.__setattr__(self, "x", x)
    object.__setattr__(self, "y", y)

  def __repr__(self): return f"Affine({self.x}, {self.y})"
  def __str__(self): return f"({self.x:#x}, {self.y:#x})"
  def __hash__(self): return hash((self.x, self.y))
  def __reduce__(self): return Affine, (self.x, self.y)

  def __iter__(self) -> Iterator[int]:
    yield self.x
    yield self.y

  def __eq__(self, other):
    if not isinstance(other, Point): raise TypeError(f"Points cannot be compared with {type(other)}")
    return isinstance(other, Affine) and self.x == other.x and self.y == other.y


class Infinity(Point):
  """The group identity, the point at infinity"""
  __slots__ = ()
  is_infinity = True

  def __repr__(self): return "INFINITY"
  def __str__(self): return "INFINITY"
  def __hash__(self): return hash(Infinity)

  def __iter__(self):
    raise ValueError("The point at infinity does not have coordinates")

  def __eq__(self, other):
    if not isinstance(other, Point): raise TypeError(f"Points cannot be compared with {type(other)}")
    return isinstance(other, Infinity)

  def __reduce__(self):
    # Unpickles to the module constant
    return "INFINITY"


INFINITY = Infinity()
