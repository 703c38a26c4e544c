"""Review instructions and their wire format.

Wire format (lengths little-endian u32)::

    [u8 tag][len][title bytes][u8 rating][len][description bytes]

Tag 0 creates a review, tag 1 updates one. Decoding only checks structure;
rating bounds, field limits and authorization are the processor's business.
"""

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from reviews.program.errors import InvalidInstruction

_LENGTH = struct.Struct("<I")

# tag + title length + rating + description length
MIN_FRAME_SIZE = 1 + _LENGTH.size + 1 + _LENGTH.size


class InstructionTag(IntEnum):
    CREATE_REVIEW = 0
    UPDATE_REVIEW = 1


@dataclass(frozen=True)
class CreateReview:
    """Create the review at (submitter, title)."""

    tag: ClassVar[InstructionTag] = InstructionTag.CREATE_REVIEW

    title: str
    rating: int
    description: str


@dataclass(frozen=True)
class UpdateReview:
    """Replace rating and description of the review at (submitter, title)."""

    tag: ClassVar[InstructionTag] = InstructionTag.UPDATE_REVIEW

    title: str
    rating: int
    description: str


ReviewCommand = CreateReview | UpdateReview

_COMMANDS = {
    InstructionTag.CREATE_REVIEW: CreateReview,
    InstructionTag.UPDATE_REVIEW: UpdateReview,
}


def decode_instruction(data: bytes) -> ReviewCommand:
    data = bytes(data)
    if not data:
        raise InvalidInstruction("Instruction data is empty")

    try:
        tag = InstructionTag(data[0])
    except ValueError:
        raise InvalidInstruction(f"Unknown instruction tag {data[0]}") from None

    if len(data) < MIN_FRAME_SIZE:
        raise InvalidInstruction(f"Instruction is {len(data)} bytes, at least {MIN_FRAME_SIZE} required")

    title, offset = _read_text(data, 1, "title")
    if offset >= len(data):
        raise InvalidInstruction("Instruction ends before the rating")
    rating = data[offset]
    description, offset = _read_text(data, offset + 1, "description")
    if offset != len(data):
        raise InvalidInstruction(f"{len(data) - offset} unexpected bytes after the description")

    return _COMMANDS[tag](title=title, rating=rating, description=description)


def encode_instruction(command: ReviewCommand) -> bytes:
    """Pack ``command`` into instruction data; the inverse of decode_instruction."""
    if not 0 <= command.rating <= 0xFF:
        raise InvalidInstruction(f"Rating {command.rating} does not fit in one byte")
    title = command.title.encode("utf-8")
    description = command.description.encode("utf-8")
    return b"".join(
        [
            bytes([command.tag]),
            _LENGTH.pack(len(title)),
            title,
            bytes([command.rating]),
            _LENGTH.pack(len(description)),
            description,
        ]
    )


def _read_text(data: bytes, offset: int, name: str) -> tuple[str, int]:
    if len(data) - offset < _LENGTH.size:
        raise InvalidInstruction(f"Instruction ends before the {name} length")
    (length,) = _LENGTH.unpack_from(data, offset)
    offset += _LENGTH.size

    remaining = len(data) - offset
    if length > remaining:
        raise InvalidInstruction(f"{name} declares {length} bytes but only {remaining} remain")
    try:
        text = data[offset : offset + length].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidInstruction(f"{name} is not valid UTF-8") from exc
    return text, offset + length
