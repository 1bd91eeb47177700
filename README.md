# signalsim

Building blocks for simple discrete-time signal and control experiments:

- **Signal generators** (`signalsim.signals`): a constant source wrapped by
  decorators that add a square or triangle wave or uniform white noise,
  produce a sine wave, or clip to a symmetric amplitude limit.
- **PID controller** (`signalsim.pid`): a P, PI or PID controller with a
  fixed time step of 1.
- **SISO composites** (`signalsim.siso`): connect single-input single-output
  blocks in series or in parallel, and nest them freely.
- **Signal description reader** (`signalsim.factory`): rebuild a generator
  chain from a whitespace-separated text description.
- **Interactive terminal interface** (`signalsim.cli`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
signalsim
```

starts a menu-driven session in the terminal (menus are in Polish). From the
main menu you can:

1. choose a signal: constant, sine, square, triangle or white noise
   (square and triangle waves are given by period and duty cycle);
2. wrap the current signal in an amplitude limiter;
3. build a series or parallel loop of PID controllers that every sample is
   passed through;
4. print generated samples, twenty at a time;
5. save samples to `<name>.txt` in the current directory as tab-separated
   `time input output` lines after three `#` header lines;
6. show the type of the active signal;
7. leave.

`python -m signalsim.cli` starts the same session. If the session fails, the
error is written to standard error and the exit status is 1.

## Library use

Signal generators decorate one another; every generator has `generate(t)`
and a `type_name`:

```python
from signalsim.signals import ConstantGenerator, SineGenerator, AmplitudeLimiter

signal = AmplitudeLimiter(SineGenerator(ConstantGenerator(0.0), 4.0, 0.05), 3.0)
samples = [signal.generate(step * 0.1) for step in range(100)]
```

`SquareGenerator`, `TriangleGenerator` and `WhiteNoiseGenerator` add their
wave or noise to the signal they wrap. `SineGenerator` returns
`amplitude * sin(2*pi*frequency*t)` and does not add the wrapped signal.
`WhiteNoiseGenerator` accepts a `random.Random` instance for reproducible
noise.

A PID controller turns an error into a control value:

```python
from signalsim.pid import PIDController

pid = PIDController(0.5, 10.0, 0.2)
print([round(pid.simulate(e), 3) for e in (0.0, 1.0, 1.0)])  # [0.0, 0.65, 0.6]
```

Leaving out `ti` or `td` gives a P or PI controller. Gains and times must be
positive; otherwise `ValueError` is raised.

Composites pass a value through their children:

```python
from signalsim.siso import ScalingComponent, SeriesComposite, ParallelComposite

series = SeriesComposite()
series.add(ScalingComponent(2.0))
series.add(ScalingComponent(3.0))
print(series.simulate(5.0))  # 30.0

parallel = ParallelComposite()
parallel.add(ScalingComponent(2.0))
parallel.add(ScalingComponent(1.5))
print(parallel.simulate(5.0))  # 17.5
```

A `ScalingComponent` can also wrap another SISO block, such as a
`PIDController`, and then delegates to it. `remove` takes out a child
again and `len()` gives the number of children.

A generator chain can be read from a text stream:

```python
import io
from signalsim.factory import read_signal

text = "OgranicznikAmplitudy 1.0 SinusGenerator 2.0 0.5 0 0 WartoscStalaGenerator 0.0"
signal = read_signal(io.StringIO(text))
```

`NULL` in place of a signal yields `None`. An unknown signal type, a missing
value or a value that is not a number raises `SignalFormatError`.

## What it does not do

There is no plant model: the simulation loop in the terminal interface holds
PID controllers only, so samples pass through controllers without a process
to regulate. Generator chains can be read from text but not written back out.