"""
JSON ⇄ 와이어 맵 ⇄ TransactionDSLInput

송신: TransactionDSLInput → 와이어 맵 → JSON 문자열
수신: JSON 문자열 → 와이어 맵 → TransactionDSLInput

수신 시 JSON 숫자는 Decimal로 디코딩 (parse_float=Decimal).
float를 거치지 않으므로 "value": 0.00000001 같은 값도 정밀도 손실 없이 복원.
"""

import json
import logging
from decimal import Decimal
from typing import Any

from core.transaction.marshal import to_transaction_map
from core.transaction.types import TransactionDSLInput
from core.transaction.unmarshal import from_transaction_map

logger = logging.getLogger(__name__)


class WireDecodeError(Exception):
    """JSON 디코딩 실패 또는 최상위가 객체가 아님"""

    pass


def _json_default(value: Any) -> Any:
    """json.dumps 기본 변환 (metadata 안의 Decimal 등)"""
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_wire_map(wire_map: dict[str, Any]) -> str:
    """와이어 맵 → JSON 문자열"""
    return json.dumps(wire_map, ensure_ascii=False, default=_json_default)


def decode_wire_map(text: str | bytes) -> dict[str, Any]:
    """JSON 문자열 → 와이어 맵

    Raises:
        WireDecodeError: JSON 형식 오류 또는 최상위가 객체가 아닌 경우
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except ValueError as e:
        raise WireDecodeError(f"invalid transaction JSON: {e}") from e

    if not isinstance(data, dict):
        raise WireDecodeError(
            f"transaction JSON must be an object, got {type(data).__name__}"
        )

    return data


def encode_transaction(transaction: TransactionDSLInput) -> str:
    """TransactionDSLInput → JSON 문자열 (검증하지 않음)"""
    body = encode_wire_map(to_transaction_map(transaction))
    logger.debug(f"거래 인코딩 완료: {len(body)} bytes")
    return body


def decode_transaction(text: str | bytes) -> TransactionDSLInput:
    """JSON 문자열 → TransactionDSLInput (검증하지 않음)

    Raises:
        WireDecodeError: JSON 형식 오류 또는 최상위가 객체가 아닌 경우
    """
    transaction = from_transaction_map(decode_wire_map(text))
    assert transaction is not None
    return transaction
