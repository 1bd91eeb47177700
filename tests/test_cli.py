import io
import sys

import pytest

from signalsim.cli import UserInterface, main
from signalsim.pid import PIDController


def run_session(text):
    out = io.StringIO()
    UserInterface(io.StringIO(text), out).run()
    return out.getvalue()


def sample_rows(output):
    return [line for line in output.splitlines() if "Wejscie:" in line]


def test_exit_immediately():
    output = run_session("7\n")
    assert "Dziekuje za korzystanie z programu!" in output
    assert sample_rows(output) == []


def test_generate_without_signal_is_refused():
    output = run_session("4\n7\n")
    assert "Najpierw wybierz sygnal!" in output


def test_parameters_without_signal():
    output = run_session("6\n7\n")
    assert "Brak aktywnego sygnalu." in output


def test_invalid_menu_choice_is_reported():
    output = run_session("9\nabc\n7\n")
    assert output.count("Nieprawidlowy wybor. Podaj liczbe z zakresu 1-7: ") == 2


def test_constant_signal_samples():
    output = run_session("1\n1\n2.5\n4\n3\n0.1\n7\n")
    rows = sample_rows(output)
    assert len(rows) == 3
    assert rows[0] == "Probka    1: Wejscie:     2.500000 | Wyjscie:     2.500000"
    assert all(row.endswith("2.500000 | Wyjscie:     2.500000") for row in rows)


def test_invalid_number_is_asked_again():
    output = run_session("1\n1\nxyz\n2\n7\n")
    assert "Nieprawidlowa wartosc. Podaj liczbe: " in output
    assert output.count("Podaj wartosc stala: ") == 2


def test_limiter_clips_and_swaps():
    output = run_session("1\n1\n5\n2\n3\n-2\n4\n1\n0\n7\n")
    assert "Zamieniono wartosci - min: -2, max: 3" in output
    assert "Ogranicznik amplitudy zostal dodany!" in output
    assert sample_rows(output)[0].startswith("Probka    1: Wejscie:     3.000000")


def test_parameters_show_type():
    output = run_session("1\n1\n5\n2\n1\n2\n6\n7\n")
    assert "OgranicznikAmplitudy" in output


def test_duty_out_of_range_is_asked_again():
    output = run_session("1\n3\n1\n1\n1.5\n0.5\n7\n")
    assert "Wypelnienie musi byc w zakresie 0.0-1.0!" in output
    assert "Sygnal zostal utworzony pomyslnie!" in output


def test_series_loop_with_pid():
    output = run_session("1\n1\n2\n3\n1\n1\n1\n1\n1\nn\n4\n2\n1\n7\n")
    reference = PIDController(1.0, 1.0, 1.0)
    expected = [reference.simulate(2.0), reference.simulate(2.0)]
    rows = sample_rows(output)
    assert len(rows) == 2
    for row, value in zip(rows, expected):
        assert row.endswith(f"Wyjscie: {value:12.6f}")


def test_parallel_loop_sums_two_controllers():
    session = "1\n1\n1\n3\n2\n1\n1\n1\n1\nt\n1\n1\n1\n1\nn\n4\n1\n1\n7\n"
    output = run_session(session)
    single = PIDController(1.0, 1.0, 1.0).simulate(1.0)
    assert sample_rows(output)[0].endswith(f"Wyjscie: {2 * single:12.6f}")


def test_pagination_stops_on_no():
    output = run_session("1\n1\n1\n4\n25\n1\nn\n7\n")
    assert len(sample_rows(output)) == 20
    assert "Wyswietlono 20 probek. Czy kontynuowac? (t/n): " in output


def test_pagination_continues_on_yes():
    output = run_session("1\n1\n1\n4\n25\n1\nt\n7\n")
    assert len(sample_rows(output)) == 25


def test_save_to_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = run_session("1\n1\n2\n5\nout\n2\n0.5\n7\n")
    lines = (tmp_path / "out.txt").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "# Wygenerowany sygnal - WartoscStala"
    assert lines[1] == "# Liczba probek: 2"
    assert lines[2] == "# Format: czas[s] wejscie wyjscie"
    assert lines[3:] == ["0.000000\t2.000000\t2.000000", "0.500000\t2.000000\t2.000000"]
    assert "Sygnal zostal zapisany do pliku: out.txt" in output


def test_save_keeps_writing_after_display_stops(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = run_session("1\n1\n1\n5\nlong\n25\n1\nn\n7\n")
    lines = (tmp_path / "long.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3 + 25
    assert len(sample_rows(output)) == 20
    assert "Kontynuuje zapis do pliku bez wyswietlania..." in output


def test_save_to_unwritable_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    output = run_session("1\n1\n1\n5\nmissing/dir/file\n1\n1\n7\n")
    assert "Blad: Nie mozna utworzyc pliku missing/dir/file.txt" in output


def test_nonpositive_pid_gain_raises():
    with pytest.raises(ValueError):
        run_session("3\n1\n1\n0\n1\n1\nn\n7\n")


def test_end_of_input_raises():
    with pytest.raises(EOFError):
        run_session("1\n")


def test_main_success(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("7\n"))
    assert main() == 0
    assert "Dziekuje za korzystanie z programu!" in capsys.readouterr().out


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Błąd: ")