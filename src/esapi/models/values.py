from enum import Enum
from typing import Union


class Auto(str, Enum):
    """Marker for parameters the server can size on its own, such as ``slices``."""

    AUTO = "auto"

    def __str__(self) -> str:
        return self.value


AUTO = Auto.AUTO

SliceCount = Union[int, Auto]


def parse_slice_count(value: object) -> SliceCount:
    """Normalise a slice count to either a positive ``int`` or ``AUTO``.

    Raises:
        ValueError: If the value is neither a positive integer nor ``"auto"``.
    """
    if isinstance(value, Auto):
        return value
    if isinstance(value, str):
        if value.lower() == Auto.AUTO.value:
            return AUTO
        raise ValueError(f"expected a positive integer or 'auto', got {value!r}")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected a positive integer or 'auto', got {value!r}")
    if value < 1:
        raise ValueError(f"slice count must be positive, got {value}")
    return value
