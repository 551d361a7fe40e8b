"""
This module records how the conserved quantities of a simulation evolve over a run.

The EnergyReporter class samples the simulation's energy breakdown (kinetic, potential,
total, relative error) together with the step count and clock, once for the initial state
and then every interval steps, by hooking into NBodySimulation.evolve through its on_step
callback. Samples collect as plain dictionaries and are exported as a pandas DataFrame or a
CSV file, so error curves of different integrators can be compared side by side. The
reporter only observes; it never changes the run.
"""

from __future__ import annotations
from typing import Dict, List
import pandas as pd
from .simulation import NBodySimulation



class EnergyReporter:
	columns = ["step", "time", "T", "V", "E", "dE_rel"]

	def __init__(self, sim: NBodySimulation, interval: int | None = None) -> None:
		self.sim = sim
		if interval is None:
			interval = sim.cfg.report_interval
		self.interval = max(1, int(interval))
		self.rows: List[Dict[str, float]] = []
		self.sample()

	def sample(self) -> None:
		parts = self.sim.diagnostics.energy_breakdown()
		self.rows.append(dict(step=self.sim.steps_taken, time=self.sim.time, **parts))

	def _on_step(self, sim: NBodySimulation) -> None:
		if sim.steps_taken % self.interval == 0:
			self.sample()

	def run(self, kind, duration: float) -> pd.DataFrame:
		self.sim.evolve(kind, duration, on_step=self._on_step)
		if self.rows[-1]["step"] != self.sim.steps_taken:
			self.sample()
		return self.to_frame()

	def to_frame(self) -> pd.DataFrame:
		return pd.DataFrame(self.rows, columns=self.columns)

	def max_abs_error(self) -> float:
		if not self.rows:
			return 0.0
		return max(abs(r["dE_rel"]) for r in self.rows)

	def save(self, filename: str) -> None:
		df = self.to_frame()
		df.to_csv(filename, index=False)
		print(f"Saved {len(df)} samples to {filename}")
