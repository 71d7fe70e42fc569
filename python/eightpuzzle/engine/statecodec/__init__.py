from eightpuzzle.engine.statecodec.codec import (
    BLANK_SHIFT,
    TILE_BITS,
    TILE_MASK,
    WORD_BITS,
    PackedState,
    decode,
    decode_blank_pos,
    decode_tile,
    encode,
    get_mask,
    rotate_right,
    wrap_around,
)

__all__ = [
    "BLANK_SHIFT",
    "TILE_BITS",
    "TILE_MASK",
    "WORD_BITS",
    "PackedState",
    "decode",
    "decode_blank_pos",
    "decode_tile",
    "encode",
    "get_mask",
    "rotate_right",
    "wrap_around",
]
