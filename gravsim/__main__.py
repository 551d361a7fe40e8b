import argparse
from .configurations import CONFIGURATIONS, get_config
from .energy_reporter import EnergyReporter
from .sim_config import IntegratorKind, SimConfig
from .simulation import NBodySimulation

"""
Command line entry point: python -m gravsim runs one of the named initial conditions with the chosen integrator and prints the energy diagnostics, optionally writing the sampled energy history to CSV. Without --duration the configuration runs for one orbital period.

"""


def main(argv=None) -> int:
	parser = argparse.ArgumentParser(prog="gravsim", description="Run a small N-body simulation.")
	parser.add_argument("configuration", choices=sorted(CONFIGURATIONS))
	parser.add_argument("-i", "--integrator", default="rk4", choices=[k.value for k in IntegratorKind])
	parser.add_argument("--dt", type=float, default=1.0e-4)
	parser.add_argument("--duration", type=float, default=None)
	parser.add_argument("--interval", type=int, default=100)
	parser.add_argument("--csv", default=None)
	args = parser.parse_args(argv)

	config = get_config(args.configuration)
	cfg = SimConfig(dt=args.dt, integrator=args.integrator, report_interval=args.interval)
	sim = NBodySimulation.from_config(config, cfg=cfg)

	duration = config.period if args.duration is None else args.duration
	print(f"{config.name} ({config.discovered}): {sim.n_bodies} bodies, "
		  f"{args.integrator}, dt={sim.dt}, duration={duration}")

	reporter = EnergyReporter(sim, cfg.report_interval)
	reporter.run(cfg.integrator_kind, duration)

	print(f"steps: {sim.steps_taken}  time: {sim.time:.6f}")
	print(f"E0: {sim.initial_energy:.9f}  E: {sim.total_energy():.9f}  (reference {config.energy})")
	print(f"relative energy error: {sim.relative_energy_error():.3e}  "
		  f"max |error|: {reporter.max_abs_error():.3e}")
	for i, b in enumerate(sim.bodies):
		print(f"  body {i}: pos={tuple(b.pos)} vel={tuple(b.vel)}")

	if args.csv:
		reporter.save(args.csv)
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
