from fastapi import APIRouter, Depends, HTTPException, status
import logging

from shorturl.schemas.codec import CodecInfoResponse, DecodeResponse, EncodeResponse
from shorturl.services.codec import CodecService, get_codec
from shorturl.utils.encoding import Codec, InvalidSymbol

logger = logging.getLogger(__name__)

router = APIRouter(tags=["codec"])

@router.get("/codec", response_model=CodecInfoResponse)
def codec_info_endpoint(codec: Codec = Depends(get_codec)):
    return CodecInfoResponse(
        alphabet="".join(codec.alphabet_in_use()),
        base=codec.base,
        use_shuffled_alphabet=codec.use_shuffled_alphabet,
        offset=codec.offset,
    )

@router.get("/encode/{value}", response_model=EncodeResponse)
def encode_endpoint(value: int, codec: Codec = Depends(get_codec)):
    try:
        code = CodecService.encode_id(codec, value)
    except ValueError as e:
        logger.error(f"Failed to encode {value} due to: {str(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return EncodeResponse(value=value, code=code)

@router.get("/decode/{code}", response_model=DecodeResponse)
def decode_endpoint(code: str, codec: Codec = Depends(get_codec)):
    """
    Recover the integer behind a code. Malformed or tampered codes are reported as not found.
    """
    try:
        value = CodecService.decode_code(codec, code)
    except InvalidSymbol:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Code not found")
    return DecodeResponse(code=code, value=value)
