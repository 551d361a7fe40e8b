"""
This initialization file serves as the main entry point for the gravsim package, exposing
its public API through a single namespace.

It re-exports the vector and body primitives (Vec3, Body), the simulator
(NBodySimulation) with its configuration (SimConfig, IntegratorKind), the integrator and
its three schemes (leapfrog, rk2, rk4), the conservation diagnostics, the named initial
conditions with their factories, the energy reporting and batch analysis tools, and the
exception types. Everything is computed with G = 1.
"""

from .vec3 import Vec3
from .body import Body
from .errors import (
	NBodyError,
	UnsupportedIntegratorError,
	InvalidTimeStepError,
	InvalidBodyError,
	InvalidStateError,
	ZeroBaselineEnergyError,
	UnknownConfigurationError,
	CoincidentBodiesError,
)
from .sim_config import SimConfig, IntegratorKind
from .simulation_validator import SimulationValidator

from .integration_scheme_base import IntegrationScheme
from .leapfrog_scheme import LeapfrogScheme
from .rk2_scheme import RK2Scheme
from .rk4_scheme import RK4Scheme
from .integrator import Integrator
from .diagnostics import Diagnostics
from .simulation import NBodySimulation

from .configurations import (
	BodySpec,
	NBodyConfig,
	CONFIGURATIONS,
	get_config,
	make_simulation,
	two_body_simulation,
	figure8_kali_simulation,
)
from .energy_reporter import EnergyReporter
from .batch_energy_analyzer import BatchEnergyAnalyzer


__all__ = [
	"Vec3",
	"Body",
	"NBodyError",
	"UnsupportedIntegratorError",
	"InvalidTimeStepError",
	"InvalidBodyError",
	"InvalidStateError",
	"ZeroBaselineEnergyError",
	"UnknownConfigurationError",
	"CoincidentBodiesError",
	"SimConfig",
	"IntegratorKind",
	"SimulationValidator",
	"IntegrationScheme",
	"LeapfrogScheme",
	"RK2Scheme",
	"RK4Scheme",
	"Integrator",
	"Diagnostics",
	"NBodySimulation",
	"BodySpec",
	"NBodyConfig",
	"CONFIGURATIONS",
	"get_config",
	"make_simulation",
	"two_body_simulation",
	"figure8_kali_simulation",
	"EnergyReporter",
	"BatchEnergyAnalyzer",
]
