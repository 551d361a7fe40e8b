"""
This module defines Vec3, the three-component real vector used for every physical
quantity in the simulation (positions, velocities, accelerations, momenta).

Vec3 has value semantics: addition, subtraction, negation, scaling, division, dot and
cross products all return new vectors or scalars and never touch their operands. The one
exception is fill, which overwrites all three components in place and returns None so it
cannot be mistaken for the pure arithmetic API. Dividing by exactly zero raises
ZeroDivisionError, the same as plain float division. Components are stored as Python
floats rather than numpy scalars so the integration hot path keeps IEEE double rounding
identical to straightforward scalar arithmetic; to_array and from_array convert at the
boundary where vectorized numpy code takes over.
"""

from __future__ import annotations
import math
from typing import Iterator
import numpy as np



class Vec3:
	__slots__ = ("x", "y", "z")

	def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
		self.x = float(x)
		self.y = float(y)
		self.z = float(z)

	@classmethod
	def zeros(cls) -> "Vec3":
		return cls(0.0, 0.0, 0.0)

	@classmethod
	def from_array(cls, arr) -> "Vec3":
		a = np.asarray(arr, dtype=float).ravel()
		if a.size != 3:
			raise ValueError(f"Vec3 needs exactly 3 components, got {a.size}")
		return cls(a[0], a[1], a[2])

	def to_array(self) -> np.ndarray:
		return np.array([self.x, self.y, self.z], dtype=np.float64)

	def copy(self) -> "Vec3":
		return Vec3(self.x, self.y, self.z)

	def fill(self, s: float) -> None:
		s = float(s)
		self.x = s
		self.y = s
		self.z = s

	def __add__(self, other: "Vec3") -> "Vec3":
		return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

	def __sub__(self, other: "Vec3") -> "Vec3":
		return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

	def __neg__(self) -> "Vec3":
		return Vec3(-self.x, -self.y, -self.z)

	def __mul__(self, s: float) -> "Vec3":
		return Vec3(self.x * s, self.y * s, self.z * s)

	__rmul__ = __mul__

	def __truediv__(self, s: float) -> "Vec3":
		if s == 0:
			raise ZeroDivisionError("Vec3 division by zero")
		return Vec3(self.x / s, self.y / s, self.z / s)

	def dot(self, other: "Vec3") -> float:
		return self.x * other.x + self.y * other.y + self.z * other.z

	def cross(self, other: "Vec3") -> "Vec3":
		return Vec3(
			self.y * other.z - self.z * other.y,
			self.z * other.x - self.x * other.z,
			self.x * other.y - self.y * other.x,
		)

	def norm(self) -> float:
		return math.sqrt(self.dot(self))

	def isclose(self, other: "Vec3", abs_tol: float = 1e-6) -> bool:
		return (
			math.isclose(self.x, other.x, rel_tol=0.0, abs_tol=abs_tol)
			and math.isclose(self.y, other.y, rel_tol=0.0, abs_tol=abs_tol)
			and math.isclose(self.z, other.z, rel_tol=0.0, abs_tol=abs_tol)
		)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Vec3):
			return NotImplemented
		return self.x == other.x and self.y == other.y and self.z == other.z

	# mutable through fill, so not hashable
	__hash__ = None

	def __iter__(self) -> Iterator[float]:
		yield self.x
		yield self.y
		yield self.z

	def __repr__(self) -> str:
		return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"
