"""Signal generators built as a chain of decorators over a base signal."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod

_SAMPLING_RATE = 1000.0


class SignalGenerator(ABC):
    """Produces a signal value for a given time."""

    type_name: str = "SygnalGenerator"

    @abstractmethod
    def generate(self, t: float) -> float:
        """Return the signal value at time ``t``."""


class SignalDecorator(SignalGenerator):
    """Wraps another generator and passes its value through."""

    def __init__(self, inner: SignalGenerator | None) -> None:
        self.inner = inner

    @property
    def type_name(self) -> str:  # type: ignore[override]
        if self.inner is None:
            return type(self).__name__
        return self.inner.type_name

    def generate(self, t: float) -> float:
        if self.inner is None:
            return 0.0
        return self.inner.generate(t)


class ConstantGenerator(SignalGenerator):
    """Returns the same value at every time."""

    type_name = "WartoscStala"

    def __init__(self, value: float) -> None:
        self.value = value

    def generate(self, t: float) -> float:
        return self.value


class SineGenerator(SignalDecorator):
    """Sine wave ``amplitude * sin(2*pi*frequency*t)``.

    The wrapped signal is not added to the output. The difference-equation
    state ``x1``/``x2`` is kept so it can be stored and restored.
    """

    type_name = "SinusGenerator"

    def __init__(
        self, inner: SignalGenerator | None, amplitude: float, frequency: float
    ) -> None:
        super().__init__(inner)
        self.amplitude = amplitude
        self.frequency = frequency
        self.omega = 2.0 * math.pi * frequency / _SAMPLING_RATE
        self.x1 = 0.0
        self.x2 = amplitude * math.sin(self.omega)

    def generate(self, t: float) -> float:
        return self.amplitude * math.sin(2 * 3.14159 * self.frequency * t)

    def set_parameters(self, amplitude: float, frequency: float) -> None:
        """Change amplitude and frequency and reset the internal state."""
        self.amplitude = amplitude
        self.frequency = frequency
        self.omega = 2.0 * math.pi * frequency
        self.x1 = 0.0
        self.x2 = amplitude * math.sin(self.omega)

    def set_internal_state(self, x1: float, x2: float) -> None:
        self.x1 = x1
        self.x2 = x2


class SquareGenerator(SignalDecorator):
    """Square wave added to the wrapped signal.

    Within each period the value is ``+amplitude`` for the first ``duty``
    fraction and ``-amplitude`` afterwards. A non-positive frequency gives a
    constant ``+amplitude``.
    """

    type_name = "ProstokatGenerator"

    def __init__(
        self,
        inner: SignalGenerator | None,
        amplitude: float,
        frequency: float,
        duty: float,
    ) -> None:
        super().__init__(inner)
        self.amplitude = amplitude
        self.frequency = frequency
        self.duty = duty
        self.time = 0.0

    @property
    def period(self) -> float:
        return 1.0 / self.frequency if self.frequency > 0 else 0.0

    def generate(self, t: float) -> float:
        period = self.period
        base = super().generate(t)
        if period <= 0.0:
            return base + self.amplitude
        phase = math.fmod(t, period)
        value = self.amplitude if phase < self.duty * period else -self.amplitude
        return base + value

    def set_parameters(self, amplitude: float, frequency: float, duty: float) -> None:
        self.amplitude = amplitude
        self.frequency = frequency
        self.duty = duty


class TriangleGenerator(SignalDecorator):
    """Triangle wave added to the wrapped signal.

    The wave rises from ``-amplitude`` to ``+amplitude`` over the first
    ``duty`` fraction of the period and falls back over the rest. A duty
    outside the open interval (0, 1) given at construction becomes 0.5.
    """

    type_name = "TrojkatGenerator"

    def __init__(
        self,
        inner: SignalGenerator | None,
        amplitude: float,
        frequency: float,
        duty: float = 0.5,
    ) -> None:
        super().__init__(inner)
        self.amplitude = amplitude
        self.frequency = frequency
        self.duty = duty if 0.0 < duty < 1.0 else 0.5
        self.time = 0.0

    @property
    def period(self) -> float:
        return 1.0 / self.frequency if self.frequency > 0 else 0.0

    def generate(self, t: float) -> float:
        period = 1.0 / self.frequency if self.frequency != 0 else math.inf
        phase = math.fmod(t, period)
        rise_end = self.duty * period
        if phase < rise_end:
            value = (2 * self.amplitude / rise_end) * phase - self.amplitude
        else:
            value = (
                -2 * self.amplitude / (period * (1 - self.duty))
            ) * (phase - rise_end) + self.amplitude
        return super().generate(t) + value

    def set_parameters(self, amplitude: float, frequency: float, duty: float) -> None:
        self.amplitude = amplitude
        self.frequency = frequency
        self.duty = duty


class WhiteNoiseGenerator(SignalDecorator):
    """Uniform noise in ``[-amplitude, amplitude)`` added to the wrapped signal."""

    type_name = "SzumBialy"

    def __init__(
        self,
        inner: SignalGenerator | None,
        amplitude: float,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(inner)
        self.amplitude = amplitude
        self.rng = rng if rng is not None else random.Random()

    def generate(self, t: float) -> float:
        noise = (2.0 * self.rng.random() - 1.0) * self.amplitude
        return super().generate(t) + noise


class AmplitudeLimiter(SignalDecorator):
    """Clips the wrapped signal to ``[-limit, limit]``."""

    type_name = "OgranicznikAmplitudy"

    def __init__(self, inner: SignalGenerator | None, limit: float) -> None:
        super().__init__(inner)
        self.limit = abs(limit)

    @property
    def limit(self) -> float:
        return self._upper

    @limit.setter
    def limit(self, value: float) -> None:
        self._upper = value
        self._lower = -value

    def generate(self, t: float) -> float:
        value = super().generate(t)
        if value > self._upper:
            return self._upper
        if value < self._lower:
            return self._lower
        return value