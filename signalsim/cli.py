"""Interactive terminal front end for building and sampling signals."""

from __future__ import annotations

import re
import sys
from typing import TextIO

from .pid import PIDController
from .signals import (
    AmplitudeLimiter,
    ConstantGenerator,
    SignalGenerator,
    SineGenerator,
    SquareGenerator,
    TriangleGenerator,
    WhiteNoiseGenerator,
)
from .siso import Component, ParallelComposite, ScalingComponent, SeriesComposite

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PAGE = 20


class UserInterface:
    """Menu-driven session reading answers from ``stdin`` and writing to ``stdout``."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._generator: SignalGenerator | None = None
        self._loop: Component | None = None
        self._fixed_output = False

    # --- output -------------------------------------------------------

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def _line(self, text: str = "") -> None:
        self._stdout.write(text + "\n")

    def _number(self, value: float) -> str:
        return f"{value:.6f}" if self._fixed_output else f"{value:g}"

    # --- input --------------------------------------------------------

    def _next_line(self) -> str:
        line = self._stdin.readline()
        if line == "":
            raise EOFError("unexpected end of input")
        return line

    def _next_token(self) -> str:
        while True:
            words = self._next_line().split()
            if words:
                return words[0]

    def _read_choice(self, low: int, high: int) -> int:
        while True:
            match = _INT_PREFIX.match(self._next_token())
            if match and low <= int(match.group()) <= high:
                return int(match.group())
            self._write(f"Nieprawidlowy wybor. Podaj liczbe z zakresu {low}-{high}: ")

    def _read_float(self, prompt: str) -> float:
        while True:
            self._write(prompt)
            match = _FLOAT_PREFIX.match(self._next_token())
            if match:
                return float(match.group())
            self._write("Nieprawidlowa wartosc. Podaj liczbe: ")

    def _read_positive_int(self, prompt: str) -> int:
        while True:
            self._write(prompt)
            match = _INT_PREFIX.match(self._next_token())
            if match and int(match.group()) >= 1:
                return int(match.group())
            self._write("Nieprawidlowa wartosc. Podaj liczbe calkowita wieksza od 0: ")

    def _read_yes(self) -> bool:
        return self._next_token()[0] in ("t", "T")

    # --- main loop ----------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user chooses to leave."""
        self._line("=== GENERATOR SYGNALOW - INTERFEJS UZYTKOWNIKA ===")
        self._line("Witaj w interaktywnym generatorze sygnalow!")
        self._line()
        while True:
            self._show_menu()
            choice = self._read_choice(1, 7)
            if choice == 7:
                self._line("Dziekuje za korzystanie z programu!")
                self._line()
                return
            if choice == 1:
                self._choose_signal()
            elif choice == 3:
                self._configure_loop()
            elif self._generator is None:
                if choice == 6:
                    self._line("Brak aktywnego sygnalu.")
                else:
                    self._line("Najpierw wybierz sygnal!")
            elif choice == 2:
                self._add_limiter()
            elif choice == 4:
                self._generate_samples()
            elif choice == 5:
                self._save_to_file()
            elif choice == 6:
                self._show_parameters()
            self._line()

    def _show_menu(self) -> None:
        self._line("=== MENU GLOWNE ===")
        self._line("1. Wybierz typ sygnalu")
        self._line("2. Dodaj ogranicznik amplitudy")
        self._line("3. Konfiguruj petle symulacji")
        self._line("4. Generuj probki sygnalu")
        self._line("5. Zapisz sygnal do pliku")
        self._line("6. Wyswietl parametry aktualnego sygnalu")
        self._line("7. Wyjscie")
        self._write("Wybierz opcje (1-7): ")

    # --- signal construction -----------------------------------------

    def _choose_signal(self) -> None:
        self._line()
        self._line("=== WYBOR TYPU SYGNALU ===")
        self._line("1. Wartosc stala")
        self._line("2. Sygnal sinusoidalny")
        self._line("3. Sygnal prostokatny")
        self._line("4. Sygnal trojkatny")
        self._line("5. Szum bialy")
        self._write("Wybierz typ sygnalu (1-5): ")
        builders = {
            1: self._make_constant,
            2: self._make_sine,
            3: self._make_square,
            4: self._make_triangle,
            5: self._make_noise,
        }
        self._generator = builders[self._read_choice(1, 5)]()
        self._line("Sygnal zostal utworzony pomyslnie!")

    def _make_constant(self) -> SignalGenerator:
        self._line()
        self._line("=== KONFIGURACJA WARTOSCI STALEJ ===")
        return ConstantGenerator(self._read_float("Podaj wartosc stala: "))

    def _make_sine(self) -> SignalGenerator:
        self._line()
        self._line("=== KONFIGURACJA SYGNALU SINUSOIDALNEGO ===")
        amplitude = self._read_float("Podaj amplitude: ")
        frequency = self._read_float("Podaj czestotliwosc [Hz]: ")
        return SineGenerator(ConstantGenerator(0.0), amplitude, frequency)

    def _read_periodic(self) -> tuple[float, float, float]:
        amplitude = self._read_float("Podaj amplitude: ")
        period = self._read_float("Podaj okres [s]: ")
        duty = self._read_float("Podaj wypelnienie (0.0-1.0): ")
        while not 0.0 <= duty <= 1.0:
            self._line("Wypelnienie musi byc w zakresie 0.0-1.0!")
            duty = self._read_float("Podaj wypelnienie (0.0-1.0): ")
        frequency = 1.0 / period if period > 0.0 else 0.0
        return amplitude, frequency, duty

    def _make_square(self) -> SignalGenerator:
        self._line()
        self._line("=== KONFIGURACJA SYGNALU PROSTOKATNEGO ===")
        amplitude, frequency, duty = self._read_periodic()
        return SquareGenerator(ConstantGenerator(0.0), amplitude, frequency, duty)

    def _make_triangle(self) -> SignalGenerator:
        self._line()
        self._line("=== KONFIGURACJA SYGNALU TROJKATNEGO ===")
        amplitude, frequency, duty = self._read_periodic()
        return TriangleGenerator(ConstantGenerator(0.0), amplitude, frequency, duty)

    def _make_noise(self) -> SignalGenerator:
        self._line()
        self._line("=== KONFIGURACJA SZUMU BIALEGO ===")
        amplitude = self._read_float("Podaj amplitude szumu: ")
        return WhiteNoiseGenerator(ConstantGenerator(0.0), amplitude)

    def _add_limiter(self) -> None:
        self._line()
        self._line("=== DODAWANIE OGRANICZNIKA AMPLITUDY ===")
        low = self._read_float("Podaj minimalna amplitude: ")
        high = self._read_float("Podaj maksymalna amplitude: ")
        if low > high:
            low, high = high, low
            self._line(
                f"Zamieniono wartosci - min: {self._number(low)}, max: {self._number(high)}"
            )
        # The limiter is symmetric about zero, so the wider bound wins.
        limit = max(abs(low), abs(high))
        self._generator = AmplitudeLimiter(self._generator, limit)
        self._line("Ogranicznik amplitudy zostal dodany!")

    # --- simulation loop ---------------------------------------------

    def _configure_loop(self) -> None:
        self._line("--- Konfiguracja petli symulacji ---")
        self._line("1. Petla szeregowa")
        self._line("2. Petla rownolegla")
        loop: Component = SeriesComposite() if self._read_choice(1, 2) == 1 else ParallelComposite()
        self._loop = loop
        while True:
            self._line("--- Dodaj obiekt do petli ---")
            self._line("1. Regulator PID")
            self._read_choice(1, 1)
            loop.add(ScalingComponent(1.0, self._make_pid()))
            self._write("Dodac kolejny obiekt? (t/n): ")
            if not self._read_yes():
                return

    def _make_pid(self) -> PIDController:
        self._line()
        self._line("--- Konfiguracja Regulatora PID ---")
        k = self._read_float("Podaj wzmocnienie (k): ")
        ti = self._read_float("Podaj czas calkowania (Ti): ")
        td = self._read_float("Podaj czas rozniczkowania (Td): ")
        return PIDController(k, ti, td)

    # --- sampling -----------------------------------------------------

    def _sample(self, index: int, step: float) -> tuple[float, float, float]:
        assert self._generator is not None
        t = index * step
        value_in = self._generator.generate(t)
        value_out = self._loop.simulate(value_in) if self._loop is not None else value_in
        return t, value_in, value_out

    def _show_sample(self, index: int, value_in: float, value_out: float) -> None:
        self._line(
            f"Probka {index + 1:4d}: Wejscie: {value_in:12.6f} | Wyjscie: {value_out:12.6f}"
        )

    def _generate_samples(self) -> None:
        self._line()
        self._line("=== GENEROWANIE PROBEK SYGNALU ===")
        count = self._read_positive_int("Podaj liczbe probek do wygenerowania: ")
        step = self._read_float(
            "Podaj krok czasowy [s] (wplywa na generatory zalezne od czasu): "
        )
        self._line()
        self._line("Wygenerowane probki:")
        self._fixed_output = True
        for index in range(count):
            _, value_in, value_out = self._sample(index, step)
            self._show_sample(index, value_in, value_out)
            shown = index + 1
            if shown % _PAGE == 0 and shown < count:
                self._line()
                self._write(f"Wyswietlono {shown} probek. Czy kontynuowac? (t/n): ")
                if not self._read_yes():
                    break
                self._line()

    def _show_parameters(self) -> None:
        assert self._generator is not None
        self._line(f"Aktywny sygnal: {self._generator.type_name}")

    def _save_to_file(self) -> None:
        assert self._generator is not None
        self._line()
        self._line("=== ZAPIS SYGNALU DO PLIKU ===")
        self._write("Podaj nazwe pliku (bez rozszerzenia): ")
        filename = self._next_line().rstrip("\r\n") + ".txt"
        count = self._read_positive_int("Podaj liczbe probek do zapisania: ")
        step = self._read_float(
            "Podaj krok czasowy [s] (wplywa na generatory zalezne od czasu): "
        )
        try:
            handle = open(filename, "w", encoding="utf-8")
        except OSError:
            self._line(f"Blad: Nie mozna utworzyc pliku {filename}")
            return

        with handle:
            handle.write(f"# Wygenerowany sygnal - {self._generator.type_name}\n")
            handle.write(f"# Liczba probek: {count}\n")
            handle.write("# Format: czas[s] wejscie wyjscie\n")
            self._line()
            self._line("Wygenerowane probki (zapisywane do pliku):")
            self._fixed_output = True
            showing = True
            for index in range(count):
                t, value_in, value_out = self._sample(index, step)
                handle.write(f"{t:.6f}\t{value_in:.6f}\t{value_out:.6f}\n")
                if not showing:
                    continue
                self._show_sample(index, value_in, value_out)
                shown = index + 1
                if shown % _PAGE == 0 and shown < count:
                    self._line()
                    self._write(
                        f"Wyswietlono {shown} probek. Czy kontynuowac wyswietlanie? (t/n): "
                    )
                    if self._read_yes():
                        self._line()
                    else:
                        self._line("Kontynuuje zapis do pliku bez wyswietlania...")
                        showing = False

        self._line()
        self._line(f"Sygnal zostal zapisany do pliku: {filename}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive session on the terminal; return the exit status."""
    try:
        UserInterface(sys.stdin, sys.stdout).run()
    except Exception as error:  # noqa: BLE001 - report any failure and exit non-zero
        sys.stderr.write(f"Błąd: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())