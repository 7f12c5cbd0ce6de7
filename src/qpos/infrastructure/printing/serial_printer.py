"""python-escpos implementation of SerialPrinterPort."""

from __future__ import annotations

import logging

import serial
from escpos.exceptions import Error as EscposError
from escpos.printer import Serial

from qpos.domain.exceptions import TransientIO
from qpos.domain.port.printer import SerialPrinterPort

logger = logging.getLogger(__name__)


class EscposSerialPrinterPort(SerialPrinterPort):
    """Thermal printer on a serial device such as ``/dev/ttyUSB0`` or ``COM3``.

    With no device configured, ``request_device`` fails the same way a
    user declining the device picker would.
    """

    def __init__(self, device: str | None) -> None:
        self._device = device
        self._printer: Serial | None = None

    def request_device(self) -> None:
        if not self._device:
            raise TransientIO("No serial printer selected (set QPOS_PRINTER_PORT)")

    def open(self, baud_rate: int, timeout: float) -> None:
        try:
            printer = Serial(devfile=self._device, baudrate=baud_rate, timeout=timeout)
            printer.open()
            printer.device.write_timeout = timeout
        except (EscposError, serial.SerialException, ValueError) as exc:
            raise TransientIO(f"Cannot open printer on {self._device}: {exc}") from exc
        self._printer = printer

    def write(self, data: bytes) -> None:
        if self._printer is None:
            raise TransientIO("Printer port is not open")
        try:
            # Receipt text already carries its own ESC/POS sequences.
            self._printer.device.write(data)
        except serial.SerialException as exc:  # includes write timeouts
            raise TransientIO(f"Write to {self._device} failed: {exc}") from exc

    def close(self) -> None:
        if self._printer is None:
            return
        try:
            self._printer.close()
        except serial.SerialException as exc:
            logger.warning("Closing %s failed: %s", self._device, exc)
        finally:
            self._printer = None
