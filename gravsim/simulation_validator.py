"""
This module provides validation utilities for N-body simulation inputs.

The SimulationValidator class offers static methods to check that a time quantum is a
finite positive number and that a body ensemble is usable: every entry is a Body with a
positive finite mass, positions and velocities are finite, and no two bodies are closer
than a minimum separation (by default, no two bodies share a position). report_invalid_state
prints a labelled description of what failed so configuration errors can be traced before
the simulation starts.
"""

from __future__ import annotations
import itertools
import math
import numbers
from typing import List, Sequence
from .body import Body



class SimulationValidator:
	@staticmethod
	def dt_is_valid(dt) -> bool:
		if isinstance(dt, bool) or not isinstance(dt, numbers.Real):
			return False
		return math.isfinite(float(dt)) and float(dt) > 0.0

	@staticmethod
	def state_problems(bodies: Sequence[Body], min_separation: float = 0.0) -> List[str]:
		problems = []
		for i, b in enumerate(bodies):
			if not isinstance(b, Body):
				problems.append(f"bodies[{i}] is {type(b).__name__}, not Body")
				continue
			if not (b.mass > 0.0 and math.isfinite(b.mass)):
				problems.append(f"bodies[{i}] has mass {b.mass}")
			if not all(math.isfinite(c) for c in b.pos):
				problems.append(f"bodies[{i}] has non-finite position {b.pos!r}")
			if not all(math.isfinite(c) for c in b.vel):
				problems.append(f"bodies[{i}] has non-finite velocity {b.vel!r}")

		if problems:
			return problems

		for (i, a), (j, b) in itertools.combinations(enumerate(bodies), 2):
			if a is b:
				problems.append(f"bodies[{i}] and bodies[{j}] are the same object")
				continue
			d = (b.pos - a.pos).norm()
			if d == 0.0 or d < min_separation:
				problems.append(f"bodies[{i}] and bodies[{j}] are {d:.3g} apart")
		return problems

	@staticmethod
	def report_invalid_state(label: str, problems=None) -> None:

		print(f"[invalid] {label}")
		if problems:
			for p in problems:
				print(f"  {p}")
