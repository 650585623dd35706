# re-export common schemas for simpler imports
from .codec import EncodeResponse, DecodeResponse, CodecInfoResponse

__all__ = [
    "EncodeResponse",
    "DecodeResponse",
    "CodecInfoResponse",
]
