"""Error types raised while loading and transforming Doxygen output."""

from pathlib import Path


class ParseError(Exception):
    """Raised when an XML or config file cannot be read or has the wrong shape."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        """Store the offending path and every field-level problem found."""
        self.path = Path(path) if path is not None else None
        self.errors = list(errors or [])
        details = message
        if self.path is not None:
            details = f"{message}: {self.path}"
        if self.errors:
            details += "\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(details)
        self.message = message


class ConfigurationError(Exception):
    """Raised for mapping tables or settings that cannot describe the input."""
