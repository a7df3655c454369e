from .delay import delay, delay_fail
from .timeout import TimeoutPolicy, timeout, timeout_with

__all__ = (
    "TimeoutPolicy",
    "delay",
    "delay_fail",
    "timeout",
    "timeout_with",
)
