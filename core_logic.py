import os
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from fastapi import HTTPException, status

import config
from encoding import Radix, RadixLike, decode_to_bytes, validate_digits

# --- LOGGING SETUP ---

def setup_logging() -> logging.Logger:
    """Configure structured logging with rotation"""
    logger = logging.getLogger("basecoder")
    # An unknown LOG_LEVEL is reported by Config.validate() at startup
    level = logging.getLevelName(config.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if config.LOG_TO_FILE:
            os.makedirs(config.LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(config.LOG_DIR, "basecoder.log"),
                maxBytes=config.LOG_MAX_BYTES,
                backupCount=config.LOG_BACKUP_COUNT
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger

logger = setup_logging()

# --- CUSTOM EXCEPTIONS (REQUIRED BY ROUTERS) ---

class ValidationException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class PayloadTooLargeException(HTTPException):
    def __init__(self, detail: str = "Input exceeds maximum length"):
        super().__init__(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=detail)

# --- CHUNKED DECODING ---

def split_into_chunks(digits: str, chunk_size: int) -> List[str]:
    if chunk_size < 1:
        raise ValueError("chunk_size must be a positive integer")
    return [digits[start:start + chunk_size] for start in range(0, len(digits), chunk_size)]


def decode_in_chunks(
    digits: Optional[str],
    radix: RadixLike = Radix.OCTAL,
    chunk_size: int = config.CHUNK_SIZE,
    max_workers: int = config.MAX_WORKERS,
) -> List[List[int]]:
    """
    Splits a digit string into fixed-size chunks and decodes them on a thread pool.

    Every chunk is decoded as its own number, so joining the results does NOT
    give the bytes of the whole string. Results come back in input order.
    The whole string is validated before any chunk is scheduled, so an
    InvalidDigit index refers to the position in the full string.
    """
    radix = Radix.from_value(radix)
    if digits is None or not digits.strip():
        return []

    validate_digits(digits, radix)
    chunks = split_into_chunks(digits, chunk_size)

    logger.debug(f"Decoding {len(digits)} {radix.name} digits as {len(chunks)} chunks")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda chunk: decode_to_bytes(chunk, radix), chunks))


async def decode_in_chunks_async(
    digits: Optional[str],
    radix: RadixLike = Radix.OCTAL,
    chunk_size: int = config.CHUNK_SIZE,
    max_workers: int = config.MAX_WORKERS,
) -> List[List[int]]:
    """Runs decode_in_chunks off the event loop."""
    return await asyncio.to_thread(decode_in_chunks, digits, radix, chunk_size, max_workers)
