"""Printer-side ports: the serial device and the human print surface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SerialPrinterPort(ABC):
    """A byte-oriented serial connection to a thermal printer.

    Every method raises TransientIO on failure, including when no
    device is available or selected.
    """

    @abstractmethod
    def request_device(self) -> None:
        """Select the device to print on."""

    @abstractmethod
    def open(self, baud_rate: int, timeout: float) -> None:
        """Open the selected device; *timeout* bounds every write."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Send raw bytes to the printer."""

    @abstractmethod
    def close(self) -> None:
        """Release the device. Safe to call when not open."""


class PrintSurface(ABC):
    """A human-facing print view (print dialog, console...)."""

    @abstractmethod
    def show(self, text: str, title: str) -> None:
        """Present plain receipt text. Raises TransientIO if it cannot."""
