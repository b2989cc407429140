# horizonkit

Orientation estimation and display helpers for a small inertial sensor rig:
sensor fusion, an artificial-horizon renderer, the command protocol of a
7.5 inch black/red e-paper panel and a 7x12 ASCII bitmap font. Pure Python,
no dependencies.

## Modules

### `horizonkit.ahrs`

- `Quaternion(w, x, y, z)`: immutable; `normalized()`, `roll_pitch()`
  (degrees) and `yaw()` (degrees in [0, 360)).
- `MadgwickFilter(beta=0.01)`: `update(gyro, accel, mag, dt)` fuses gyro
  (rad/s), accelerometer and magnetometer readings and returns the new
  quaternion, also kept in `.q`. A zero accelerometer or magnetometer
  vector leaves the estimate unchanged.
- `complementary_update(q, gyro, accel, dt)`: roll/pitch-only fallback for
  when no magnetometer sample is available.
- `GyroBiasEstimator`: `update(accel, gyro)` slowly learns gyro bias while
  the accelerometer shows no motion; `magnitude()` gives its length.
- `LowPassVector(alpha=0.6)`: exponential smoothing of a 3-vector, seeded
  by the first sample.
- `mean_offsets(samples)` and `mag_offsets(samples)`: calibration offsets
  (per-channel mean, and min/max midpoint), truncated toward zero.
- `decode_accel_gyro(data)` and `decode_mag(status, data)`: decode raw
  register bytes (12 big-endian bytes; 8 little-endian bytes with status).

### `horizonkit.horizon`

- `MonoFramebuffer(width=128, height=64)` with `set_pixel`, `get_pixel`
  and `clear`.
- `draw_horizon(fb, roll, pitch, pitch_scale=2.0)` fills sky above and
  ground below a line tilted by roll and shifted by pitch.
- `draw_center_marker(fb)` draws the three-dot marker at the centre.
- `bias_label(bias)` formats the status text, e.g. `"Bias: 0.012"`.

### `horizonkit.devio`

- `BoardIO`: abstract interface with `write`, `read`, `spi_write`, `pull`
  and `delay_ms`.
- `EpdPins`: the pin map and SPI clock rate for the panel.
- `SoftSpi(io, pins)`: bit-banged SPI with `send`, `send_many` and `read`.

### `horizonkit.epd`

`EPD7in5BV2(io, pins)` sends the panel's command sequences through any
`BoardIO`: `reset`, `init`, `init_fast`, `init_part`, `clear`,
`clear_red`, `clear_black`, `display(black, red)`,
`display_base_color(color)`, `display_partial(image, x_start, y_start,
x_end, y_end)` and `sleep`. Full-screen planes are `plane_size` bytes
(800x480 pixels, one bit each); wrong sizes raise `ValueError`.

### `horizonkit.fonts` and `horizonkit.font12`

`Font(table, width, height, first_char=" ")` is a monospaced bitmap font
with `glyph(char)` (raw bytes, `KeyError` if missing), `rows(char)`
(one integer per pixel row), `len()` and `in`. `font12()` returns the
shared 7x12 font covering `' '` to `'~'`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from horizonkit.ahrs import MadgwickFilter
from horizonkit.horizon import MonoFramebuffer, draw_horizon, draw_center_marker

fusion = MadgwickFilter(beta=0.01)
fusion.update(gyro=(0.0, 0.0, 0.0),
              accel=(0.0, 0.0, 1.0),
              mag=(1.0, 0.0, 0.0),
              dt=0.005)
roll, pitch = fusion.q.roll_pitch()

fb = MonoFramebuffer(128, 64)
draw_horizon(fb, roll, pitch, 2.0)
draw_center_marker(fb)
```

## What it does not do

- It does not talk to hardware itself. Reading the sensors, driving pins
  and sending SPI bytes are left to a `BoardIO` implementation you supply;
  that also makes it easy to record the traffic in tests.
- It has no command-line program and no main loop; you call the filters
  and renderers from your own code.
- Only the 7x12 ASCII font is included; there is no font for Chinese or
  other non-ASCII characters.