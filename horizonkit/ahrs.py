"""Attitude estimation from accelerometer, gyroscope and magnetometer samples."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

Vector = Tuple[float, float, float]

_MAG_LIMIT = 32767


@dataclass(frozen=True)
class Quaternion:
    """Orientation quaternion with scalar part ``w``."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def normalized(self) -> "Quaternion":
        """Return this quaternion scaled to unit length."""
        norm = math.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2)
        if norm == 0.0:
            raise ValueError("cannot normalize a zero quaternion")
        return Quaternion(self.w / norm, self.x / norm, self.y / norm, self.z / norm)

    def roll_pitch(self) -> Tuple[float, float]:
        """Return (roll, pitch) in degrees."""
        q0, q1, q2, q3 = self.w, self.x, self.y, self.z
        roll = math.atan2(2.0 * (q0 * q1 + q2 * q3), 1.0 - 2.0 * (q1 * q1 + q2 * q2))
        sin_pitch = max(-1.0, min(1.0, 2.0 * (q0 * q2 - q3 * q1)))
        pitch = math.asin(sin_pitch)
        return math.degrees(roll), math.degrees(pitch)

    def yaw(self) -> float:
        """Return the heading in degrees within [0, 360)."""
        q0, q1, q2, q3 = self.w, self.x, self.y, self.z
        yaw = math.degrees(
            math.atan2(2.0 * (q1 * q2 + q0 * q3), q0 * q0 + q1 * q1 - q2 * q2 - q3 * q3)
        )
        if yaw < 0:
            yaw += 360.0
        return yaw


def _unit(v: Sequence[float]) -> Optional[Vector]:
    norm = math.sqrt(sum(c * c for c in v))
    if norm == 0.0:
        return None
    return (v[0] / norm, v[1] / norm, v[2] / norm)


class MadgwickFilter:
    """Full Madgwick AHRS filter fusing gyro, accel and magnetometer."""

    def __init__(self, beta: float = 0.01) -> None:
        self.beta = beta
        self.q = Quaternion()

    def update(self, gyro: Sequence[float], accel: Sequence[float],
               mag: Sequence[float], dt: float) -> Quaternion:
        """Advance the estimate by ``dt`` seconds; gyro is in rad/s.

        A zero accelerometer or magnetometer vector leaves the estimate unchanged.
        """
        a = _unit(accel)
        if a is None:
            return self.q
        m = _unit(mag)
        if m is None:
            return self.q
        gx, gy, gz = gyro
        ax, ay, az = a
        mx, my, mz = m
        q0, q1, q2, q3 = self.q.w, self.q.x, self.q.y, self.q.z

        _2q0, _2q1, _2q2, _2q3 = 2.0 * q0, 2.0 * q1, 2.0 * q2, 2.0 * q3
        q0q0, q0q1, q0q2, q0q3 = q0 * q0, q0 * q1, q0 * q2, q0 * q3
        q1q1, q1q2, q1q3 = q1 * q1, q1 * q2, q1 * q3
        q2q2, q2q3, q3q3 = q2 * q2, q2 * q3, q3 * q3

        _2q0mx = 2.0 * q0 * mx
        _2q0my = 2.0 * q0 * my
        _2q0mz = 2.0 * q0 * mz
        _2q1mx = 2.0 * q1 * mx

        hx = (mx * q0q0 - _2q0my * q3 + _2q0mz * q2 + mx * q1q1 + _2q1 * my * q2
              + _2q1 * mz * q3 - mx * q2q2 - mx * q3q3)
        hy = (_2q0mx * q3 + my * q0q0 - _2q0mz * q1 + _2q1mx * q2 - my * q1q1
              + my * q2q2 + _2q2 * mz * q3 - my * q3q3)
        _2bx = math.sqrt(hx * hx + hy * hy)
        _2bz = (-_2q0mx * q2 + _2q0my * q1 + mz * q0q0 + _2q1mx * q3 - mz * q1q1
                + _2q2 * my * q3 - mz * q2q2 + mz * q3q3)

        ea_x = 2.0 * (q1q3 - q0q2) - ax
        ea_y = 2.0 * (q0q1 + q2q3) - ay
        ea_z = 1 - 2.0 * (q1q1 + q2q2) - az
        em_x = _2bx * (0.5 - q2q2 - q3q3) + _2bz * (q1q3 - q0q2) - mx
        em_y = _2bx * (q1q2 - q0q3) + _2bz * (q0q1 + q2q3) - my
        em_z = _2bx * (q0q2 + q1q3) + _2bz * (0.5 - q1q1 - q2q2) - mz

        s0 = (-_2q2 * ea_x + _2q1 * ea_y - _2bz * q2 * em_x
              + (-_2bx * q3 + _2bz * q1) * em_y + _2bx * q2 * em_z)
        s1 = (_2q3 * ea_x + _2q0 * ea_y - 4.0 * q1 * ea_z + _2bz * q3 * em_x
              + (_2bx * q2 + _2bz * q0) * em_y + (_2bx * q3 - 4.0 * _2bz * q1) * em_z)
        s2 = (-_2q0 * ea_x + _2q3 * ea_y - 4.0 * q2 * ea_z
              + (-4.0 * _2bx * q2 - _2bz * q0) * em_x
              + (_2bx * q1 + _2bz * q3) * em_y + (_2bx * q0 - 4.0 * _2bz * q2) * em_z)
        s3 = (_2q1 * ea_x + _2q2 * ea_y + (-4.0 * _2bx * q3 + _2bz * q1) * em_x
              + (-_2bx * q0 + _2bz * q2) * em_y + _2bx * q1 * em_z)

        norm = math.sqrt(s0 * s0 + s1 * s1 + s2 * s2 + s3 * s3)
        if norm > 0.0:
            s0, s1, s2, s3 = s0 / norm, s1 / norm, s2 / norm, s3 / norm

        beta = self.beta
        q_dot0 = 0.5 * (-q1 * gx - q2 * gy - q3 * gz) - beta * s0
        q_dot1 = 0.5 * (q0 * gx + q2 * gz - q3 * gy) - beta * s1
        q_dot2 = 0.5 * (q0 * gy - q1 * gz + q3 * gx) - beta * s2
        q_dot3 = 0.5 * (q0 * gz + q1 * gy - q2 * gx) - beta * s3

        self.q = Quaternion(
            q0 + q_dot0 * dt, q1 + q_dot1 * dt, q2 + q_dot2 * dt, q3 + q_dot3 * dt
        ).normalized()
        return self.q


def complementary_update(q: Quaternion, gyro: Sequence[float],
                         accel: Sequence[float], dt: float) -> Quaternion:
    """Roll/pitch complementary filter; the result carries no yaw correction."""
    accel_weight = 0.02
    gx, gy, _ = gyro
    ax, ay, az = accel

    accel_roll = math.atan2(ay, math.sqrt(ax * ax + az * az))
    accel_pitch = math.atan2(-ax, math.sqrt(ay * ay + az * az))

    roll_deg, pitch_deg = q.roll_pitch()
    q_roll = math.radians(roll_deg) + gx * dt
    q_pitch = math.radians(pitch_deg) + gy * dt

    q_roll = q_roll * (1.0 - accel_weight) + accel_roll * accel_weight
    q_pitch = q_pitch * (1.0 - accel_weight) + accel_pitch * accel_weight

    cr, sr = math.cos(q_roll * 0.5), math.sin(q_roll * 0.5)
    cp, sp = math.cos(q_pitch * 0.5), math.sin(q_pitch * 0.5)
    return Quaternion(cr * cp, sr * cp, cr * sp, sr * sp)


@dataclass
class GyroBiasEstimator:
    """Slowly learns gyro bias while the accelerometer reports no motion."""

    motion_threshold: float = 0.1
    alpha: float = 0.0001
    bias: Vector = (0.0, 0.0, 0.0)
    variance: float = 0.0
    _prev_accel: Vector = field(default=(0.0, 0.0, 0.0), repr=False)

    def update(self, accel: Sequence[float], gyro: Sequence[float]) -> Vector:
        """Feed one accel/gyro sample and return the current bias."""
        deltas = [abs(a - p) for a, p in zip(accel, self._prev_accel)]
        self.variance = sum(deltas) / 3.0
        if self.variance < self.motion_threshold:
            self.bias = tuple(b + self.alpha * g for b, g in zip(self.bias, gyro))
        self._prev_accel = tuple(accel)
        return self.bias

    def magnitude(self) -> float:
        """Euclidean length of the bias vector."""
        return math.sqrt(sum(b * b for b in self.bias))


class LowPassVector:
    """Exponential smoothing of a 3-vector, seeded by the first sample."""

    def __init__(self, alpha: float = 0.6) -> None:
        self.alpha = alpha
        self.value: Optional[Vector] = None

    def update(self, sample: Sequence[float]) -> Vector:
        """Blend ``sample`` into the filtered value and return it."""
        previous = tuple(sample) if self.value is None else self.value
        self.value = tuple(
            self.alpha * s + (1.0 - self.alpha) * p for s, p in zip(sample, previous)
        )
        return self.value


def _c_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def mag_offsets(samples: Iterable[Sequence[int]]) -> Tuple[int, int, int]:
    """Hard-iron offsets: midpoint of min and max on each axis."""
    highs = [-_MAG_LIMIT] * 3
    lows = [_MAG_LIMIT] * 3
    count = 0
    for sample in samples:
        highs = [max(h, v) for h, v in zip(highs, sample)]
        lows = [min(lo, v) for lo, v in zip(lows, sample)]
        count += 1
    if not count:
        raise ValueError("no magnetometer samples")
    return tuple(_c_div(h + lo, 2) for h, lo in zip(highs, lows))


def mean_offsets(samples: Iterable[Sequence[int]]) -> Tuple[int, ...]:
    """Per-channel integer mean of raw samples, truncated toward zero."""
    totals: Optional[list] = None
    count = 0
    for sample in samples:
        if totals is None:
            totals = [0] * len(sample)
        elif len(sample) != len(totals):
            raise ValueError("samples differ in length")
        totals = [t + v for t, v in zip(totals, sample)]
        count += 1
    if totals is None:
        raise ValueError("no samples")
    return tuple(_c_div(t, count) for t in totals)


def decode_accel_gyro(data: bytes) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Decode 12 big-endian bytes into (accel, gyro) raw counts."""
    if len(data) != 12:
        raise ValueError(f"expected 12 bytes, got {len(data)}")
    values = struct.unpack(">6h", bytes(data))
    return values[:3], values[3:]


def decode_mag(status: int, data: bytes) -> Optional[Tuple[int, int, int]]:
    """Decode a magnetometer read; None if not ready or overflowed."""
    if not status & 0x01:
        return None
    if len(data) != 8:
        raise ValueError(f"expected 8 bytes, got {len(data)}")
    if data[7] & 0x08:
        return None
    return struct.unpack("<3h", bytes(data[:6]))