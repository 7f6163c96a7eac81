"""
Maxar ARD grid cell codec.
"""

from ardcoord.core.grid.codec import (
    cell_indices,
    children,
    decode,
    decode_bounds,
    encode,
    encode_finest,
    parent,
)

__all__ = [
    "cell_indices",
    "children",
    "decode",
    "decode_bounds",
    "encode",
    "encode_finest",
    "parent",
]
