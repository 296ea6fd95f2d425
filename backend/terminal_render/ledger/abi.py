"""ABI codec for the message contract's read functions."""

from __future__ import annotations

from eth_abi import decode, encode
from eth_utils import function_signature_to_4byte_selector

from terminal_render.layout.colors import bytes3_to_hex
from terminal_render.models.records import Record

# struct Message { id, author, fid, username, text, timestamp, usernameColor }
MESSAGE_TUPLE = "(uint256,address,uint256,string,string,uint256,bytes3)"

GET_MESSAGE_SELECTOR = function_signature_to_4byte_selector("getMessage(uint256)")
GET_MESSAGE_COUNT_SELECTOR = function_signature_to_4byte_selector("getMessageCount()")


def _hex(data: bytes) -> str:
    return "0x" + data.hex()


def _unhex(data: str) -> bytes:
    return bytes.fromhex(data[2:] if data.startswith("0x") else data)


def encode_get_message(record_id: int) -> str:
    return _hex(GET_MESSAGE_SELECTOR + encode(["uint256"], [record_id]))


def encode_get_message_count() -> str:
    return _hex(GET_MESSAGE_COUNT_SELECTOR)


def encode_message(record: Record) -> str:
    """Encode a Record the way ``getMessage`` returns it (test fixtures, local nodes)."""
    color = _unhex(record.color.lstrip("#").zfill(6))
    return _hex(
        encode(
            [MESSAGE_TUPLE],
            [(
                record.id,
                record.author,
                record.fid,
                record.username,
                record.text,
                record.timestamp,
                color,
            )],
        )
    )


def decode_message(data: str) -> Record | None:
    """Decode ``getMessage`` return data. Returns None for an unminted slot.

    Raises:
        eth_abi.exceptions.DecodingError: truncated or malformed payload.
        ValueError: payload is not hex.
    """
    (message,) = decode([MESSAGE_TUPLE], _unhex(data))
    record_id, author, fid, username, text, timestamp, color = message
    if not username:
        return None
    return Record(
        id=int(record_id),
        author=str(author),
        fid=int(fid),
        username=username,
        text=text,
        timestamp=int(timestamp),
        color=bytes3_to_hex(color),
    )


def decode_uint(data: str) -> int:
    (value,) = decode(["uint256"], _unhex(data))
    return int(value)
