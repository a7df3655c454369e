from __future__ import annotations

class TimeoutError(Exception):
    """Raced computation was still pending when its timer handle settled."""

    seconds: float

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Still pending after {seconds}s")

class ContractViolation(RuntimeError):
    """Handle capability misused: double transition or outcome() while pending."""

__all__ = ("ContractViolation", "TimeoutError")
