"""Application service: send a formatted receipt to a printer.

Tries the serial thermal printer first.  Any failure there (no device,
device not selected, write error, timeout) falls back to the human print
surface with the control sequences stripped.  The fallback is a normal
outcome reported as ``delivered=False``, not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from qpos.domain.exceptions import TransientIO
from qpos.domain.port.printer import PrintSurface, SerialPrinterPort
from qpos.domain.service.receipt_formatter import strip_control_codes

logger = logging.getLogger(__name__)

DEFAULT_BAUD_RATE = 9600
DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class DispatchResult:
    delivered: bool
    detail: str = ""


class PrinterDispatch:

    def __init__(
        self,
        port: SerialPrinterPort | None,
        surface: PrintSurface,
        baud_rate: int = DEFAULT_BAUD_RATE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        encoding: str = "utf-8",
        title: str = "Receipt",
    ) -> None:
        self._port = port
        self._surface = surface
        self._baud_rate = baud_rate
        self._timeout = timeout
        self._encoding = encoding
        self._title = title

    def dispatch(self, receipt_text: str, title: str | None = None) -> DispatchResult:
        """Print *receipt_text*, falling back to the print surface.

        Raises TransientIO only when the fallback itself fails.
        """
        try:
            self._transmit(receipt_text)
        except (TransientIO, OSError, UnicodeEncodeError) as exc:
            logger.warning("Thermal printer unavailable, using print view: %s", exc)
            self._surface.show(strip_control_codes(receipt_text), title or self._title)
            return DispatchResult(delivered=False, detail=str(exc))

        logger.info("Receipt sent to thermal printer")
        return DispatchResult(delivered=True)

    def _transmit(self, receipt_text: str) -> None:
        if self._port is None:
            raise TransientIO("No serial printer support configured")

        data = receipt_text.encode(self._encoding)
        self._port.request_device()
        self._port.open(self._baud_rate, self._timeout)
        try:
            self._port.write(data)
        finally:
            self._port.close()
