from .adapters import from_mapping, from_sequence, from_tuple
from .slots import Index, Key, Position, Registry, Shape, Slot

__all__ = (
    # Slots
    "Key",
    "Index",
    "Position",
    "Slot",
    # Registry
    "Shape",
    "Registry",
    # Adapters
    "from_mapping",
    "from_sequence",
    "from_tuple",
)
