from functools import lru_cache
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Lowercase, uppercase, then digits 1-9 (61 symbols, no zero)
DEFAULT_ALPHABET: Tuple[str, ...] = tuple(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ123456789"
)

# Fixed permutation of DEFAULT_ALPHABET. Must never change once codes are issued.
DEFAULT_SHUFFLED_ALPHABET: Tuple[str, ...] = tuple(
    "QqFvjKLVgWSXPCIDBuz6ihw4Hp5ZlbArME1adcTR97xot3JO82fUsNGYnemky"
)


class InvalidSymbol(ValueError):
    """Raised when a code contains a character outside the active alphabet."""

    def __init__(self, symbol: str, text: str):
        self.symbol = symbol
        self.text = text
        super().__init__(f"invalid character {symbol!r} in {text!r}")


class CodecConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    alphabet: Tuple[str, ...] = Field(default=DEFAULT_ALPHABET, min_length=2)
    shuffled_alphabet: Tuple[str, ...] = Field(default=DEFAULT_SHUFFLED_ALPHABET, min_length=2)
    use_shuffled_alphabet: bool = False
    offset: int = 0

    @field_validator('alphabet', 'shuffled_alphabet', mode='before')
    def split_alphabet(cls, v):
        if isinstance(v, str):
            return tuple(v)
        return v

    @field_validator('alphabet', 'shuffled_alphabet')
    def validate_symbols(cls, v):
        for symbol in v:
            if len(symbol) != 1:
                raise ValueError(f'alphabet symbols must be single characters, got {symbol!r}')
        return v

    @property
    def active_alphabet(self) -> Tuple[str, ...]:
        return self.shuffled_alphabet if self.use_shuffled_alphabet else self.alphabet

    @property
    def base(self) -> int:
        return len(self.active_alphabet)


@lru_cache(maxsize=32)
def symbol_index(alphabet: Tuple[str, ...]) -> Dict[str, int]:
    """Map each symbol to its digit value. The first occurrence of a duplicate wins."""
    index: Dict[str, int] = {}
    for position, symbol in enumerate(alphabet):
        index.setdefault(symbol, position)
    return index


class Codec:
    """
    Bijective base-N codec between non-negative integers and short strings.

    The configuration is an immutable CodecConfig. Reconfiguring swaps the
    whole value, and every encode/decode call works on the snapshot it read
    when it started.
    """

    def __init__(self, config: Optional[CodecConfig] = None, **overrides):
        if config is None:
            config = CodecConfig(**overrides)
        elif overrides:
            config = _updated(config, overrides)
        self.config = config

    def __repr__(self) -> str:
        return (
            f"Codec(base={self.base}, offset={self.offset}, "
            f"use_shuffled_alphabet={self.use_shuffled_alphabet})"
        )

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self.config.alphabet

    @property
    def shuffled_alphabet(self) -> Tuple[str, ...]:
        return self.config.shuffled_alphabet

    @property
    def use_shuffled_alphabet(self) -> bool:
        return self.config.use_shuffled_alphabet

    @property
    def offset(self) -> int:
        return self.config.offset

    @property
    def base(self) -> int:
        return self.config.base

    def alphabet_in_use(self) -> Tuple[str, ...]:
        return self.config.active_alphabet

    def reconfigure(self, **changes) -> "Codec":
        """Replace the configuration in place. Invalid changes leave it untouched."""
        self.config = _updated(self.config, changes)
        return self

    def replace(self, **changes) -> "Codec":
        """Return a new codec with the given changes; this one is not modified."""
        return Codec(_updated(self.config, changes))

    def encode(self, value: int) -> str:
        config = self.config
        alphabet = config.active_alphabet
        num = value + config.offset
        if num < 0:
            raise ValueError(f"Cannot encode {value} with offset {config.offset}: effective value is negative")
        if num == 0:
            return alphabet[0]

        base = len(alphabet)
        out = []
        while num:
            num, rem = divmod(num, base)
            out.append(alphabet[rem])
        return ''.join(reversed(out))

    def decode(self, text: str) -> int:
        config = self.config
        alphabet = config.active_alphabet
        index = symbol_index(alphabet)
        base = len(alphabet)

        n = 0
        for ch in text:
            try:
                n = n * base + index[ch]
            except KeyError:
                raise InvalidSymbol(ch, text) from None
        return n - config.offset


def _updated(config: CodecConfig, changes: dict) -> CodecConfig:
    # model_copy(update=...) skips validation, so rebuild from the merged fields
    return CodecConfig(**{**config.model_dump(), **changes})
