"""
와이어 포맷 어댑터

거래 입력의 JSON 인코딩/디코딩과 제출 클라이언트.
"""

from adapters.wire.client import TransactionClient
from adapters.wire.json_codec import (
    WireDecodeError,
    decode_transaction,
    decode_wire_map,
    encode_transaction,
    encode_wire_map,
)

__all__ = [
    "TransactionClient",
    "WireDecodeError",
    "encode_wire_map",
    "decode_wire_map",
    "encode_transaction",
    "decode_transaction",
]
