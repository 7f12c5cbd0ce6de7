"""Human-facing print surfaces used when the thermal printer is unreachable."""

from __future__ import annotations

import html
from datetime import datetime
from pathlib import Path
from typing import Callable

import click

from qpos.domain.exceptions import TransientIO
from qpos.domain.port.printer import PrintSurface

_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>
      body {{
        font-family: 'Courier New', monospace;
        font-size: 12px;
        line-height: 1.2;
        margin: 0;
        padding: 10px;
        width: {width}mm;
        background: white;
      }}
      pre {{ margin: 0; white-space: pre-wrap; word-wrap: break-word; }}
      @media print {{
        body {{ margin: 0; padding: 5px; }}
        @page {{ margin: 0; size: {width}mm auto; }}
      }}
    </style>
  </head>
  <body>
    <pre>{body}</pre>
    <script>window.onload = function () {{ window.print(); }};</script>
  </body>
</html>
"""


class HtmlPrintSurface(PrintSurface):
    """Writes a print-formatted HTML page and opens it in the browser."""

    def __init__(self, output_dir: Path, paper_width_mm: int = 80, launch: bool = True) -> None:
        self._output_dir = output_dir
        self._paper_width_mm = paper_width_mm
        self._launch = launch
        self.last_path: Path | None = None

    def show(self, text: str, title: str) -> None:
        page = _PAGE.format(
            title=html.escape(title),
            width=self._paper_width_mm,
            body=html.escape(text),
        )
        path = self._output_dir / f"receipt-{datetime.now():%Y%m%d-%H%M%S-%f}.html"
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(page, encoding="utf-8")
        except OSError as exc:
            raise TransientIO(f"Cannot create print view: {exc}") from exc

        self.last_path = path
        if self._launch:
            click.launch(str(path))


class ConsolePrintSurface(PrintSurface):
    """Echoes the receipt text to the terminal."""

    def __init__(self, echo: Callable[[str], None] = click.echo) -> None:
        self._echo = echo

    def show(self, text: str, title: str) -> None:
        self._echo(f"--- {title} ---")
        self._echo(text.rstrip("\n"))
