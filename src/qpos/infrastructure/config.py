"""Runtime configuration, read from the environment with defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from qpos.domain.exceptions import InvalidInput
from qpos.domain.service.receipt_formatter import columns_for_paper

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

PRINT_SURFACES = ("html", "console")


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path = _DEFAULT_DATA_DIR
    printer_port: str | None = None
    printer_baud: int = 9600
    printer_timeout: float = 5.0
    paper_width_mm: int = 80
    print_dir: Path | None = None
    print_surface: str = "html"
    log_level: str = "WARNING"
    log_format: str = "text"
    user_id: str = "1"

    @property
    def receipt_columns(self) -> int:
        return columns_for_paper(self.paper_width_mm)

    @property
    def receipt_dir(self) -> Path:
        return self.print_dir or self.data_dir / "receipts"


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build an AppConfig from ``QPOS_*`` variables.

    Raises InvalidInput for values that cannot be parsed.
    """
    env = os.environ if environ is None else environ

    data_dir = Path(env["QPOS_DATA_DIR"]) if env.get("QPOS_DATA_DIR") else _DEFAULT_DATA_DIR
    print_dir = Path(env["QPOS_PRINT_DIR"]) if env.get("QPOS_PRINT_DIR") else None

    config = AppConfig(
        data_dir=data_dir,
        printer_port=env.get("QPOS_PRINTER_PORT") or None,
        printer_baud=_parse(env, "QPOS_PRINTER_BAUD", int, 9600),
        printer_timeout=_parse(env, "QPOS_PRINTER_TIMEOUT", float, 5.0),
        paper_width_mm=_parse(env, "QPOS_PAPER_WIDTH", int, 80),
        print_dir=print_dir,
        print_surface=env.get("QPOS_PRINT_SURFACE", "html").lower(),
        log_level=env.get("QPOS_LOG_LEVEL", "WARNING").upper(),
        log_format=env.get("QPOS_LOG_FORMAT", "text").lower(),
        user_id=env.get("QPOS_USER", "1"),
    )

    columns_for_paper(config.paper_width_mm)  # raises on unsupported widths
    if config.print_surface not in PRINT_SURFACES:
        raise InvalidInput(
            f"QPOS_PRINT_SURFACE must be one of {', '.join(PRINT_SURFACES)}, "
            f"got {config.print_surface!r}"
        )
    if config.printer_timeout <= 0:
        raise InvalidInput("QPOS_PRINTER_TIMEOUT must be positive")
    return config


def _parse(env: Mapping[str, str], name: str, kind: type, default):
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return kind(raw)
    except ValueError as exc:
        raise InvalidInput(f"{name} has an invalid value: {raw!r}") from exc
