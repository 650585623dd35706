from pydantic import BaseModel

# Response DTOs
class EncodeResponse(BaseModel):
    value: int
    code: str

class DecodeResponse(BaseModel):
    code: str
    value: int

class CodecInfoResponse(BaseModel):
    alphabet: str
    base: int
    use_shuffled_alphabet: bool
    offset: int
