"""
와이어 맵 → DSL 모델 변환

JSON 디코더가 만든 딕셔너리에서 TransactionDSLInput 복원.
이 계층은 검증하지 않고 예외도 발생시키지 않음 (구조 복원만 수행).
의미 검증은 호출자가 validate()로 다시 수행.

- 문자열 필드: 키가 없거나 문자열이 아니면 ""
- metadata: dict일 때만, 아니면 None
- 숫자 필드: 문자열 또는 숫자 모두 허용 (core.transaction.numeric)
- 중첩 객체: 키 값이 dict일 때만 복원, 없거나 dict가 아니면 None
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from core.transaction.numeric import (
    FloatLiteral,
    parse_numeric,
    to_decimal_string,
    to_int,
)
from core.transaction.types import (
    Amount,
    Distribute,
    FromTo,
    Rate,
    Send,
    Share,
    Source,
    TransactionDSLInput,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def get_str(data: dict[str, Any], key: str) -> str:
    """문자열 필드 추출 (없거나 문자열이 아니면 "")"""
    value = data.get(key)
    if isinstance(value, str):
        return value
    return ""


def get_metadata(data: dict[str, Any]) -> dict[str, Any] | None:
    """metadata 추출 (dict가 아니면 None)"""
    value = data.get("metadata")
    if isinstance(value, dict):
        return value
    return None


def get_object(
    data: dict[str, Any],
    key: str,
    decoder: Callable[[dict[str, Any]], T],
) -> T | None:
    """중첩 객체 추출

    키가 없는 경우와 dict가 아닌 경우를 동일하게 None 처리.
    """
    value = data.get(key)
    if not isinstance(value, dict):
        return None
    return decoder(value)


def get_objects(
    data: dict[str, Any],
    key: str,
    decoder: Callable[[dict[str, Any]], T],
) -> list[T]:
    """객체 목록 추출 (dict가 아닌 항목은 건너뜀)"""
    value = data.get(key)
    if not isinstance(value, (list, tuple)):
        return []
    return [decoder(item) for item in value if isinstance(item, dict)]


def get_decimal_str(data: dict[str, Any], key: str) -> str:
    """숫자 필드 → 10진 문자열 (없거나 해석 불가면 "")"""
    literal = parse_numeric(data.get(key))
    if literal is None:
        return ""
    if isinstance(literal, FloatLiteral):
        logger.debug(f"float 값 변환: {key}={literal.number!r}")
    return to_decimal_string(literal)


def get_int(data: dict[str, Any], key: str) -> int:
    """숫자 필드 → 정수 (없거나 해석 불가면 0)"""
    literal = parse_numeric(data.get(key))
    if literal is None:
        return 0
    number = to_int(literal)
    return number if number is not None else 0


def parse_amount(data: dict[str, Any]) -> Amount:
    """{asset, value} → Amount"""
    return Amount(
        value=get_decimal_str(data, "value"),
        asset=get_str(data, "asset"),
    )


def parse_share(data: dict[str, Any]) -> Share:
    """{percentage, percentageOfPercentage} → Share"""
    return Share(
        percentage=get_int(data, "percentage"),
        percentage_of_percentage=get_int(data, "percentageOfPercentage"),
    )


def parse_rate(data: dict[str, Any]) -> Rate:
    """{from, to, value, externalId} → Rate"""
    return Rate(
        from_=get_str(data, "from"),
        to=get_str(data, "to"),
        value=get_decimal_str(data, "value"),
        external_id=get_str(data, "externalId"),
    )


def parse_from_to(data: dict[str, Any]) -> FromTo:
    """레그 맵 → FromTo"""
    return FromTo(
        account=get_str(data, "account"),
        amount=get_object(data, "amount", parse_amount),
        share=get_object(data, "share", parse_share),
        rate=get_object(data, "rate", parse_rate),
        remaining=get_str(data, "remaining"),
        description=get_str(data, "description"),
        chart_of_accounts=get_str(data, "chartOfAccounts"),
        metadata=get_metadata(data),
    )


def parse_source(data: dict[str, Any]) -> Source:
    """{remaining?, from} → Source"""
    return Source(
        from_=tuple(get_objects(data, "from", parse_from_to)),
        remaining=get_str(data, "remaining"),
    )


def parse_distribute(data: dict[str, Any]) -> Distribute:
    """{remaining?, to} → Distribute"""
    return Distribute(
        to=tuple(get_objects(data, "to", parse_from_to)),
        remaining=get_str(data, "remaining"),
    )


def parse_send(data: dict[str, Any]) -> Send:
    """{asset, value, source?, distribute?} → Send"""
    return Send(
        asset=get_str(data, "asset"),
        value=get_decimal_str(data, "value"),
        source=get_object(data, "source", parse_source),
        distribute=get_object(data, "distribute", parse_distribute),
    )


def from_transaction_map(data: dict[str, Any] | None) -> TransactionDSLInput | None:
    """와이어 맵 → TransactionDSLInput

    API 응답/JSON 디코딩 결과 예시:
    {
        "description": "Payment",
        "pending": true,
        "send": {
            "asset": "USD",
            "value": "100.00",
            "source": {"from": [{"account": "@external/USD"}]},
            "distribute": {"to": [{"account": "acc-2"}]}
        }
    }

    Args:
        data: 디코딩된 맵 (None 또는 dict가 아니면 None 반환)

    Returns:
        TransactionDSLInput (검증되지 않음)
    """
    if not isinstance(data, dict):
        return None

    pending = data.get("pending")

    return TransactionDSLInput(
        send=get_object(data, "send", parse_send),
        description=get_str(data, "description"),
        chart_of_accounts_group_name=get_str(data, "chartOfAccountsGroupName"),
        code=get_str(data, "code"),
        pending=pending if isinstance(pending, bool) else False,
        metadata=get_metadata(data),
    )
