"""
Exception types raised by the simulation engine.

NBodyError is the common root. Mistakes in caller-supplied configuration (unknown
integrator names, bad time steps, invalid bodies or ensembles) also derive from
ValueError so generic argument handling keeps working; CoincidentBodiesError derives
from ArithmeticError because it replaces a division by a zero separation.
"""

from __future__ import annotations



class NBodyError(Exception):
    pass


class UnsupportedIntegratorError(NBodyError, ValueError):
    def __init__(self, kind) -> None:
        self.kind = kind
        super().__init__(f"unsupported integrator: {kind!r} (expected one of leapfrog, rk2, rk4)")


class InvalidTimeStepError(NBodyError, ValueError):
    pass


class InvalidBodyError(NBodyError, ValueError):
    pass


class InvalidStateError(NBodyError, ValueError):
    pass


class ZeroBaselineEnergyError(NBodyError, ValueError):
    pass


class UnknownConfigurationError(NBodyError, KeyError):
    pass


class CoincidentBodiesError(NBodyError, ArithmeticError):
    pass
