import logging
from typing import List

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

import config
from core_logic import PayloadTooLargeException, ValidationException, decode_in_chunks_async
from encoding import Radix, decode_to_bytes, encode_bytes
from models import (
    ChunkedDecodePayload, ChunkedDecodeResponse, DecodePayload, DecodeResponse,
    EncodePayload, EncodeResponse, RadixInfo
)

# --- Router Setup ---

api_router = APIRouter(
    prefix="/api/v1",
    tags=["Codec"],
)

limiter = Limiter(key_func=get_remote_address, enabled=config.RATE_LIMIT_ENABLED)

logger = logging.getLogger("basecoder")

# --- Helpers ---

def resolve_radix(value) -> Radix:
    try:
        return Radix.from_value(value)
    except ValueError as e:
        raise ValidationException(str(e))


def check_length(size: int) -> None:
    if size > config.MAX_INPUT_LENGTH:
        raise PayloadTooLargeException(
            f"Input length {size} exceeds maximum of {config.MAX_INPUT_LENGTH}"
        )

# --- API Routes ---

@api_router.get("/radices", response_model=List[RadixInfo])
async def list_radices():
    """List the supported radices and their digit alphabets."""
    return config.RADIX_INFO


@api_router.post("/decode", response_model=DecodeResponse)
@limiter.limit(config.RATE_LIMIT_CONVERT)
async def api_decode(request: Request, payload: DecodePayload):
    """Decode a digit string into unsigned big-endian byte values."""
    radix = resolve_radix(payload.radix)
    check_length(len(payload.digits or ""))

    data = decode_to_bytes(payload.digits, radix)
    return DecodeResponse(radix=radix.name, data=data, length=len(data))


@api_router.post("/encode", response_model=EncodeResponse)
@limiter.limit(config.RATE_LIMIT_CONVERT)
async def api_encode(request: Request, payload: EncodePayload):
    """Encode byte values (0-255) into a digit string."""
    radix = resolve_radix(payload.radix)
    check_length(len(payload.data or []))

    digits = encode_bytes(payload.data, radix)
    return EncodeResponse(radix=radix.name, digits=digits, length=len(digits))


@api_router.post("/decode/chunks", response_model=ChunkedDecodeResponse)
@limiter.limit(config.RATE_LIMIT_CONVERT)
async def api_decode_chunks(request: Request, payload: ChunkedDecodePayload):
    """Decode fixed-size chunks of a digit string independently of each other."""
    radix = resolve_radix(payload.radix)
    check_length(len(payload.digits or ""))

    chunks = await decode_in_chunks_async(payload.digits, radix, payload.chunk_size)
    logger.info(f"Decoded {len(chunks)} {radix.name} chunks of size {payload.chunk_size}")
    return ChunkedDecodeResponse(radix=radix.name, chunk_size=payload.chunk_size, chunks=chunks)
