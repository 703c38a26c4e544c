"""ReviewRecord and its fixed-width on-ledger layout.

Layout (all lengths little-endian u32)::

    [u8 is_initialized][u8 rating]
    [len][title bytes, zero padded to MAX_TITLE_LENGTH]
    [len][description bytes, zero padded to MAX_DESCRIPTION_LENGTH]

Every record occupies exactly RECORD_SIZE bytes whatever its content, so an
account allocated once never needs resizing. A zero-filled buffer decodes to
an uninitialized record.
"""

import struct
from dataclasses import dataclass

from reviews.program.errors import DecodeError, FieldTooLong, RatingOutOfRange

MIN_RATING = 1
MAX_RATING = 10

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 890

_LENGTH = struct.Struct("<I")
_HEADER_SIZE = 2

RECORD_SIZE = _HEADER_SIZE + _LENGTH.size + MAX_TITLE_LENGTH + _LENGTH.size + MAX_DESCRIPTION_LENGTH


@dataclass(frozen=True)
class ReviewRecord:
    """A persisted restaurant review."""

    is_initialized: bool = False
    rating: int = 0
    title: str = ""
    description: str = ""


def encode_text(value: str, limit: int, name: str) -> bytes:
    """UTF-8 encode ``value``, refusing anything longer than ``limit`` bytes."""
    raw = value.encode("utf-8")
    if len(raw) > limit:
        raise FieldTooLong(f"{name} is {len(raw)} bytes, maximum is {limit}")
    return raw


def encode_record(record: ReviewRecord) -> bytes:
    title = encode_text(record.title, MAX_TITLE_LENGTH, "title")
    description = encode_text(record.description, MAX_DESCRIPTION_LENGTH, "description")
    if not 0 <= record.rating <= 0xFF:
        raise RatingOutOfRange(f"Rating {record.rating} does not fit in one byte")

    buffer = bytearray(RECORD_SIZE)
    buffer[0] = 1 if record.is_initialized else 0
    buffer[1] = record.rating
    offset = _pack_field(buffer, _HEADER_SIZE, title, MAX_TITLE_LENGTH)
    _pack_field(buffer, offset, description, MAX_DESCRIPTION_LENGTH)
    return bytes(buffer)


def decode_record(buffer: bytes) -> ReviewRecord:
    buffer = bytes(buffer)
    if len(buffer) != RECORD_SIZE:
        raise DecodeError(f"Record must be {RECORD_SIZE} bytes, got {len(buffer)}")

    flag, rating = buffer[0], buffer[1]
    if flag > 1:
        raise DecodeError(f"Invalid initialization flag {flag}")

    title, offset = _unpack_field(buffer, _HEADER_SIZE, MAX_TITLE_LENGTH, "title")
    description, _ = _unpack_field(buffer, offset, MAX_DESCRIPTION_LENGTH, "description")
    return ReviewRecord(
        is_initialized=bool(flag),
        rating=rating,
        title=title,
        description=description,
    )


def _pack_field(buffer: bytearray, offset: int, raw: bytes, width: int) -> int:
    _LENGTH.pack_into(buffer, offset, len(raw))
    offset += _LENGTH.size
    buffer[offset : offset + len(raw)] = raw
    return offset + width


def _unpack_field(buffer: bytes, offset: int, width: int, name: str) -> tuple[str, int]:
    (length,) = _LENGTH.unpack_from(buffer, offset)
    offset += _LENGTH.size
    if length > width:
        raise DecodeError(f"{name} declares {length} bytes but its slot holds {width}")
    try:
        text = buffer[offset : offset + length].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"{name} is not valid UTF-8") from exc
    return text, offset + width
