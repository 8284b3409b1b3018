from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

import config

class DecodePayload(BaseModel):
    """Request model for decoding a digit string."""
    digits: Optional[str] = None
    radix: Union[int, str] = config.DEFAULT_RADIX

class ChunkedDecodePayload(DecodePayload):
    """Request model for decoding a digit string chunk by chunk."""
    chunk_size: int = Field(config.CHUNK_SIZE, ge=1)

class EncodePayload(BaseModel):
    """Request model for encoding byte values."""
    model_config = ConfigDict(populate_by_name=True)

    data: Optional[List[int]] = Field(None, alias="bytes")
    radix: Union[int, str] = config.DEFAULT_RADIX

class DecodeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    radix: str
    data: List[int] = Field(alias="bytes")
    length: int

class EncodeResponse(BaseModel):
    radix: str
    digits: str
    length: int

class ChunkedDecodeResponse(BaseModel):
    radix: str
    chunk_size: int
    chunks: List[List[int]]

class RadixInfo(BaseModel):
    name: str
    base: int
    alphabet: str
