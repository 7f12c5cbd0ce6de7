"""Domain-level exceptions.

Every failure the core can report is a subclass of PosError so the CLI
layer can catch them uniformly and display a user-friendly message.
"""


class PosError(Exception):
    """Base class for all qpos errors."""


class InvalidInput(PosError):
    """Malformed or out-of-range arguments (negative price, empty order...)."""


class NotFound(PosError):
    """A referenced order, menu item, category or user does not exist."""


class Unsupported(PosError):
    """The operation is declared but deliberately not implemented."""


class TransientIO(PosError):
    """Printer or persistence I/O failed; recoverable by fallback or retry."""


class AccessDenied(PosError):
    """The signed-in principal's role may not perform the operation."""
