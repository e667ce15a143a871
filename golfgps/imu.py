"""Accelerometer and gyroscope readings with gyro zero-offset calibration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Protocol

log = logging.getLogger(__name__)

ACC_RANGE_G = 4
ACC_ODR_HZ = 1000.0
GYR_RANGE_DPS = 512
GYR_ODR_HZ = 1793.6
LPF_MODE = 0
DEFAULT_CALIBRATION_SAMPLES = 200


class ImuError(RuntimeError):
    """Raised when the motion sensor fails."""


class MotionSensor(Protocol):
    """A six-axis motion sensor."""

    def init(self) -> bool: ...

    def configure_accelerometer(self, range_g: int, odr_hz: float, lpf_mode: int) -> None: ...

    def enable_accelerometer(self) -> None: ...

    def configure_gyroscope(self, range_dps: int, odr_hz: float, lpf_mode: int) -> None: ...

    def enable_gyroscope(self) -> None: ...

    def data_ready(self) -> bool: ...

    def accelerometer(self) -> tuple[float, float, float] | None: ...

    def gyroscope(self) -> tuple[float, float, float] | None: ...


@dataclass(frozen=True)
class ImuRaw:
    """Latest offset-corrected accelerometer and gyroscope readings."""

    ax: float = 0.0
    ay: float = 0.0
    az: float = 0.0
    gx: float = 0.0
    gy: float = 0.0
    gz: float = 0.0


class ImuManager:
    """Reads a motion sensor and removes the calibrated offsets."""

    def __init__(self, sensor: MotionSensor) -> None:
        self.sensor = sensor
        self.sample_delay = 0.002
        self._raw = ImuRaw()
        self._accel_offset = (0.0, 0.0, 0.0)
        self._gyro_offset = (0.0, 0.0, 0.0)

    def begin(self) -> None:
        """Configure and enable both sensors; raises ImuError if the sensor fails."""
        if not self.sensor.init():
            raise ImuError("IMU init failed")
        self.sensor.configure_accelerometer(ACC_RANGE_G, ACC_ODR_HZ, LPF_MODE)
        self.sensor.enable_accelerometer()
        self.sensor.configure_gyroscope(GYR_RANGE_DPS, GYR_ODR_HZ, LPF_MODE)
        self.sensor.enable_gyroscope()
        log.info("IMU initialized")

    def update(self) -> bool:
        """Take a new sample if one is ready; returns whether one was."""
        if not self.sensor.data_ready():
            return False
        ax, ay, az = self._raw.ax, self._raw.ay, self._raw.az
        gx, gy, gz = self._raw.gx, self._raw.gy, self._raw.gz
        accel = self.sensor.accelerometer()
        if accel is not None:
            ax, ay, az = (v - o for v, o in zip(accel, self._accel_offset))
        gyro = self.sensor.gyroscope()
        if gyro is not None:
            gx, gy, gz = (v - o for v, o in zip(gyro, self._gyro_offset))
        self._raw = ImuRaw(ax, ay, az, gx, gy, gz)
        return True

    def calibrate(self, samples: int = DEFAULT_CALIBRATION_SAMPLES) -> tuple[float, float, float]:
        """Average ``samples`` gyro readings and use them as the zero offset."""
        if samples <= 0:
            raise ValueError(f"samples must be positive, got {samples}")
        sums = [0.0, 0.0, 0.0]
        for _ in range(samples):
            while not self.sensor.data_ready():
                pass
            gyro = self.sensor.gyroscope()
            if gyro is None:
                raise ImuError("gyroscope read failed during calibration")
            for axis, value in enumerate(gyro):
                sums[axis] += value
            if self.sample_delay:
                time.sleep(self.sample_delay)
        self._gyro_offset = (sums[0] / samples, sums[1] / samples, sums[2] / samples)
        log.info("IMU gyro calibrated")
        return self._gyro_offset

    @property
    def raw(self) -> ImuRaw:
        """The last readings."""
        return self._raw