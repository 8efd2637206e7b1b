"""
Base exception classes for the combo pricing engine.
"""


class PricingEngineException(Exception):
    """
    Base exception for catalog and cart input errors.

    The pricing core is total over well-formed input and never raises, so
    every PricingEngineException points at a bad input: a catalog file, a
    combo entry or a cart line. `details` names that input (path, combo_id,
    index, ...) so the entry point can report it as structured data.

    Attributes:
        message: Human-readable error message
        details: Identifiers of the offending input; None values are dropped
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = {k: v for k, v in (details or {}).items() if v is not None}

    @property
    def error_code(self) -> str:
        """
        Stable error identifier derived from the class name.

        Example:
            DuplicateComboException → "duplicate_combo"
        """
        name = self.__class__.__name__.removesuffix("Exception")
        return "".join(f"_{c.lower()}" if c.isupper() else c for c in name).lstrip("_")

    def to_dict(self) -> dict:
        """Structured form for logs and command-line error output."""
        return {"error": self.error_code, "message": self.message, **self.details}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.details:
            details_str = ', '.join(f"{k}={v!r}" for k, v in sorted(self.details.items()))
            return f"{self.__class__.__name__}({self.message!r}, {details_str})"
        return f"{self.__class__.__name__}({self.message!r})"
