import logging
from functools import lru_cache

from shorturl.core.config import Settings, settings
from shorturl.utils.encoding import Codec, InvalidSymbol


logger = logging.getLogger(__name__)


def build_codec(config: Settings) -> Codec:
    overrides = {
        "use_shuffled_alphabet": config.CODEC_USE_SHUFFLED_ALPHABET,
        "offset": config.CODEC_OFFSET,
    }
    if config.CODEC_ALPHABET:
        overrides["alphabet"] = config.CODEC_ALPHABET
    if config.CODEC_SHUFFLED_ALPHABET:
        overrides["shuffled_alphabet"] = config.CODEC_SHUFFLED_ALPHABET
    codec = Codec(**overrides)
    logger.info("Codec configured: %r", codec)
    return codec


@lru_cache()
def get_codec() -> Codec:
    """Process-wide codec built from settings; override in tests via dependency_overrides."""
    return build_codec(settings)


class CodecService:

    @staticmethod
    def encode_id(codec: Codec, value: int) -> str:
        code = codec.encode(value)
        logger.debug("Encoded %s -> '%s'", value, code)
        return code

    @staticmethod
    def decode_code(codec: Codec, code: str) -> int:
        try:
            value = codec.decode(code)
        except InvalidSymbol as e:
            logger.warning("Rejected code '%s': invalid character '%s'", e.text, e.symbol)
            raise
        logger.debug("Decoded '%s' -> %s", code, value)
        return value
