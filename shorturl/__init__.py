from .utils.encoding import (
    DEFAULT_ALPHABET,
    DEFAULT_SHUFFLED_ALPHABET,
    Codec,
    CodecConfig,
    InvalidSymbol,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "DEFAULT_SHUFFLED_ALPHABET",
    "Codec",
    "CodecConfig",
    "InvalidSymbol",
]
