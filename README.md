# scatsig

`scatsig` simulates the light that an opaque spherical particle scatters as it
crosses a Gaussian laser beam. Each scattering order (`P0`, `P1`, `P21`, `P22`,
`P31`, `P32`) gives one Gaussian pulse over time:

    signal(t) = amplitude * exp(-2 * (t - t0)**2 / sigma**2)
    t0        = d / (2 * v) * sin(theta)

Here `d` and `v` are the particle diameter and velocity, and `theta` is the
order's scattering angle. `math.sin` receives `theta` as given, so it is read as
radians. `sigma` is the pulse width and defaults to `w0 / v`. `amplitude` is the
order's amplitude for the chosen polarization.

The package also has small helpers for coloured console output: colour codes, a
console colour state that writes ANSI escape sequences, and manipulators that
change that state.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Parameters (`scatsig.params`)

- `ScatteringMode`: an enum with `P0`, `P1`, `P21`, `P22`, `P31` and `P32`.
- `Polarization`: an enum with `ONE` and `TWO`.
- `LaserParticleParameters(d, v, w0, sigma=None)`: a frozen dataclass. If you
  leave out `sigma`, it is set to `w0 / v`.
- `ScatteringOrderParameters(mode, theta, amp_p1, amp_p2)`: a frozen dataclass.
  `amplitude(pol)` returns `amp_p1` for `Polarization.ONE` and `amp_p2`
  otherwise.

The module also holds default settings as constants:

- `PARAMETERS_P0_PATH` and `PARAMETERS_P21_P22_PATH`: names of parameter files.
- `THETA_SCATTERING`: 165.0.
- `T_START` and `T_END`: -5.0 and 10.0.
- `POLARIZATION`: `Polarization.ONE`.

## Generating signals

```python
import numpy as np

from scatsig.areas import A3SignalGenerator
from scatsig.params import (
    LaserParticleParameters,
    Polarization,
    ScatteringMode,
    ScatteringOrderParameters,
)

laser = LaserParticleParameters(d=100.0, v=10.0, w0=10.0)   # sigma = 1.0
p0 = ScatteringOrderParameters(ScatteringMode.P0, theta=0.5, amp_p1=1.0, amp_p2=0.8)
p1 = ScatteringOrderParameters(ScatteringMode.P1, theta=1.2, amp_p1=0.4, amp_p2=0.3)

gen = A3SignalGenerator((p0, p1), laser)
holder = gen.generate_signal(np.linspace(-5.0, 10.0, 1000), Polarization.ONE)

total = holder.result_signal()          # sum of all order pulses
print(len(holder), holder.modes())
print(holder.time_peak(ScatteringMode.P0), holder.sigma_width(ScatteringMode.P0))
```

The generators are in `scatsig.generators`:

- `OneOrderSignalGenerator(params, laser_params)` handles a single order.
  - `sample(time, pol)` returns a `SignalSample`.
  - `generate_signal(time, pol)` returns a `SignalHolder` with one entry.
- `TwoOrdersSignalGenerator(params, laser_params)` takes exactly two
  `ScatteringOrderParameters`.
- `ThreeOrdersSignalGenerator(params, laser_params)` takes exactly three.

Both multi-order generators raise `ValueError` for any other count. They have
these methods:

- `set_params(params)` replaces the parameters of every order.
- `set_laser_params(params)` replaces the laser and particle parameters of every
  order.
- `generate_signal(time, pol)` returns one holder with every order. If two
  orders share a mode, the first one is kept.

`scatsig.areas` has generators for particular angular areas:

| Generator | Base | Expected orders |
|---|---|---|
| `A1SignalGenerator` | three orders | P0, P1, P31 |
| `A3SignalGenerator` | two orders | P0, P1 |
| `A5SignalGenerator` | three orders | P0, P31, P32 |
| `A8SignalGenerator` | three orders | P0, P21, P31 |
| `A11SignalGenerator` | two orders | P0, P21 |
| `A13SignalGenerator` | three orders | P0, P21, P22 |

On construction, each one issues a `UserWarning` for every expected order that
is missing, and then works as normal. `missing_modes(params, required)` returns
the required modes that none of the given parameters provides.

### Signal containers (`scatsig.signals`)

`SignalSample` holds `signal` (a NumPy array), `t0`, `sigma` and `amplitude`.

`SignalHolder` maps each `ScatteringMode` to a `SignalSample`:

- `holder[mode]` gives the pulse for that order.
- `time_peak(mode)`, `amplitude(mode)` and `sigma_width(mode)` give that
  order's values.
- `time_peaks()`, `amplitudes()` and `modes()` give the values for every order,
  in insertion order.
- `result_signal()` returns the element-wise sum of all pulses. It raises
  `ValueError` when the holder is empty.

## Coloured console output

A colour code packs the text colour into the low four bits and the background
colour into the next four bits.

`scatsig.color_codes` converts between names and codes:

- `stoc(text, background=None)` turns names into a code.
- `itoc(text, background=None)` turns colour numbers into a code.
- `ctos(code)` describes a code in words.
- `invert(code)` swaps the text and background colours.
- `is_good(code)` checks that a code is valid.

Names are case-insensitive, and `_` or `-` count as spaces. Short names such as
`"lb"` are accepted. An unknown name or an out-of-range value gives `BAD_COLOR`,
and `ctos` shows that as `"BAD COLOR"`.

```python
import io

from scatsig.color_codes import ctos, invert, stoc
from scatsig.console import Console
from scatsig.manipulators import manipulator, text_manipulator

code = stoc("light blue", "black")
print(ctos(code))            # (text) light blue + (background) black
print(ctos(invert(code)))    # (text) black + (background) light blue

out = io.StringIO()
console = Console(out)
with console:                              # restores the colour on exit
    manipulator("red_on_light_blue")(console)
    text_manipulator("yellow")(console)    # keeps the background
    print(console.get_text(), console.get_background())
```

`Console(stream=None, *, attribute=DEFAULT_COLOR)` keeps track of the current
colour code. It writes an ANSI escape sequence to the stream (standard output by
default) each time a valid code is set. Invalid codes are ignored. It has these
methods:

- `get`, `get_text` and `get_background` read the current colours.
- `set` takes a packed code, two colour numbers or two colour names.
- `set_text` and `set_background` change one colour and keep the other.
- `reset` restores the default colour.

`scatsig.manipulators` builds callables that change a console and return it:

- `text_manipulator(name)` sets the text colour.
- `background_manipulator(name)` sets the background colour.
- `pair_manipulator(text, background)` sets both.
- `manipulator(name)` looks one up by name: `"reset"`, `"light_blue"`,
  `"on_light_blue"` or `"red_on_light_blue"`.

Unknown names raise `ValueError`.

## What the package does not do

- It does not read scattering-parameter files. The path constants in
  `scatsig.params` are only names; you build `ScatteringOrderParameters`
  yourself.
- It does not generate or save whole datasets of signals over ranges of
  diameters, velocities and angles.
- It has no generators for four or five orders.
- It has no command-line program.
- It has no composable coloured-string objects. Colour is applied only by
  changing a `Console`'s state.