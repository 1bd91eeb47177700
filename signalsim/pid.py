"""A discrete PID controller with a fixed unit time step."""

from __future__ import annotations

from .siso import SISO

_TIME_STEP = 1.0


def _require_positive(value: float, name: str) -> float:
    if value <= 0.0:
        raise ValueError(f"{name} must be greater than zero.")
    return value


class PIDController(SISO):
    """P, PI or PID controller depending on which time constants are given.

    The integral term is ``(k / ti) * sum(error)`` and the derivative term is
    ``k * td * (error - previous_error)``, both with a time step of 1.
    """

    def __init__(self, k: float, ti: float | None = None, td: float | None = None) -> None:
        self._k = _require_positive(k, "Gain k")
        self._ti = None if ti is None else _require_positive(ti, "Integral time ti")
        self._td = None if td is None else _require_positive(td, "Derivative time td")
        self._error_sum = 0.0
        self._previous_error = 0.0

    @property
    def k(self) -> float:
        return self._k

    @k.setter
    def k(self, value: float) -> None:
        self._k = _require_positive(value, "Gain k")

    @property
    def ti(self) -> float | None:
        return self._ti

    @ti.setter
    def ti(self, value: float) -> None:
        self._ti = _require_positive(value, "Integral time ti")

    @property
    def td(self) -> float | None:
        return self._td

    @td.setter
    def td(self, value: float) -> None:
        self._td = _require_positive(value, "Derivative time td")

    def simulate(self, error: float) -> float:
        integral = 0.0
        if self._ti is not None:
            self._error_sum += error * _TIME_STEP
            integral = (self._k / self._ti) * self._error_sum

        derivative = 0.0
        if self._td is not None:
            derivative = self._k * self._td * (error - self._previous_error) / _TIME_STEP

        self._previous_error = error
        return self._k * error + integral + derivative