"""Error taxonomy shared by every templog component."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(str, Enum):
    """Broad categories of failure surfaced to the CLI."""

    io = "io"
    parse = "parse"
    format = "format"
    domain = "domain"


class TempLogError(Exception):
    """Raised by components instead of aborting the process."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        path: Optional[Path | str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = Path(path) if path is not None else None
