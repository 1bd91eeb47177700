"""Reading signal generator chains from a whitespace-separated text stream."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from .signals import (
    AmplitudeLimiter,
    ConstantGenerator,
    SignalGenerator,
    SineGenerator,
    SquareGenerator,
    TriangleGenerator,
    WhiteNoiseGenerator,
)


class SignalFormatError(ValueError):
    """Raised when a serialized signal description cannot be read."""


def _tokenize(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_word(words: Iterator[str], what: str) -> str:
    try:
        return next(words)
    except StopIteration:
        raise SignalFormatError(f"Unexpected end of input while reading {what}") from None


def _numbers(words: Iterator[str], count: int) -> list[float]:
    values = []
    for _ in range(count):
        word = _next_word(words, "a number")
        try:
            values.append(float(word))
        except ValueError:
            raise SignalFormatError(f"Expected a number, got {word!r}") from None
    return values


def _constant(words: Iterator[str]) -> SignalGenerator:
    (value,) = _numbers(words, 1)
    return ConstantGenerator(value)


def _sine(words: Iterator[str]) -> SignalGenerator:
    amplitude, frequency, x1, x2 = _numbers(words, 4)
    generator = SineGenerator(_read(words), amplitude, frequency)
    generator.set_internal_state(x1, x2)
    return generator


def _square(words: Iterator[str]) -> SignalGenerator:
    amplitude, frequency, duty, time = _numbers(words, 4)
    generator = SquareGenerator(_read(words), amplitude, frequency, duty)
    generator.time = time
    return generator


def _triangle(words: Iterator[str]) -> SignalGenerator:
    amplitude, frequency, duty, time = _numbers(words, 4)
    generator = TriangleGenerator(_read(words), amplitude, frequency, duty)
    generator.time = time
    return generator


def _noise(words: Iterator[str]) -> SignalGenerator:
    (amplitude,) = _numbers(words, 1)
    return WhiteNoiseGenerator(_read(words), amplitude)


def _limiter(words: Iterator[str]) -> SignalGenerator:
    (limit,) = _numbers(words, 1)
    return AmplitudeLimiter(_read(words), limit)


_BUILDERS: dict[str, Callable[[Iterator[str]], SignalGenerator]] = {
    "WartoscStalaGenerator": _constant,
    "SinusGenerator": _sine,
    "ProstokatGenerator": _square,
    "TrojkatGenerator": _triangle,
    "SzumBialyGenerator": _noise,
    "OgranicznikAmplitudy": _limiter,
}


def _read(words: Iterator[str]) -> SignalGenerator | None:
    kind = _next_word(words, "a signal type")
    if kind == "NULL":
        return None
    builder = _BUILDERS.get(kind)
    if builder is None:
        raise SignalFormatError(f"Unknown signal type during deserialization: {kind}")
    return builder(words)


def read_signal(stream: TextIO) -> SignalGenerator | None:
    """Read one generator chain from ``stream``; ``NULL`` yields ``None``.

    Each entry is a type name followed by its parameters; decorators are
    followed by the entry for the signal they wrap.
    """
    return _read(_tokenize(stream))