from .engine import JoinNode, await_all
from .extract import extract
from .gather import joinM, join_map, join_sequence, join_tuple

__all__ = (
    # Engine
    "JoinNode",
    "await_all",
    # Extraction
    "extract",
    # Combinators
    "joinM",
    "join_map",
    "join_sequence",
    "join_tuple",
)
