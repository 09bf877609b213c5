"""
숫자 리터럴 변환

와이어 맵의 숫자 값은 문자열("100.50") 또는 JSON 디코더가 만든 숫자(float, int, Decimal)로 도착.
경계에서 NumericLiteral로 한 번 분류한 뒤, 변환은 이 모듈의 함수 하나로만 수행.

float는 repr(최단 왕복 표현) 기준으로 Decimal 변환 → 자릿수 잘림 없음.
예: 0.00000001 → "0.00000001", 100.5 → "100.5"
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Union

# 정수 변환 허용 자릿수 (int64 범위: 10^18 자리까지)
INT_MAX_EXPONENT = 18

# 일반 표기로 펼치는 지수 한도 (초과 시 지수 표기 유지)
PLAIN_MAX_EXPONENT = 100


@dataclass(frozen=True)
class StringLiteral:
    """문자열로 도착한 숫자 (그대로 사용)"""

    text: str


@dataclass(frozen=True)
class FloatLiteral:
    """float로 도착한 숫자 (정밀도 주의)"""

    number: float


@dataclass(frozen=True)
class ExactLiteral:
    """정확한 숫자 (int, Decimal)"""

    number: Decimal


NumericLiteral = Union[StringLiteral, FloatLiteral, ExactLiteral]


def parse_numeric(raw: Any) -> NumericLiteral | None:
    """원시 값 → NumericLiteral

    bool(int 하위 타입), NaN/Infinity, 그 외 타입은 None.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        return StringLiteral(raw)
    if isinstance(raw, float):
        if raw != raw or raw in (float("inf"), float("-inf")):
            return None
        return FloatLiteral(raw)
    if isinstance(raw, int):
        return ExactLiteral(Decimal(raw))
    if isinstance(raw, Decimal):
        if not raw.is_finite():
            return None
        return ExactLiteral(raw)
    return None


def to_decimal_string(literal: NumericLiteral) -> str:
    """NumericLiteral → 10진 문자열

    문자열은 그대로 반환 (검증은 validation 단계에서).
    """
    if isinstance(literal, StringLiteral):
        return literal.text
    if isinstance(literal, FloatLiteral):
        return format(Decimal(repr(literal.number)), "f")
    return _plain(literal.number)


def _plain(number: Decimal) -> str:
    """Decimal → 일반 표기 문자열 (지수가 너무 크거나 작으면 지수 표기)"""
    if abs(number.adjusted()) > PLAIN_MAX_EXPONENT:
        return str(number)
    return format(number, "f")


def to_int(literal: NumericLiteral) -> int | None:
    """NumericLiteral → 정수 (소수부 버림)

    정수로 해석할 수 없는 문자열, int64 범위를 넘는 값은 None.
    """
    if isinstance(literal, StringLiteral):
        number = parse_decimal(literal.text)
    elif isinstance(literal, FloatLiteral):
        number = Decimal(repr(literal.number))
    else:
        number = literal.number

    if number is None or number.adjusted() > INT_MAX_EXPONENT:
        return None
    return int(number)


def decimal_text(raw: Any) -> str:
    """원시 값 → 10진 문자열 (해석 불가 시 빈 문자열)"""
    literal = parse_numeric(raw)
    if literal is None:
        return ""
    return to_decimal_string(literal)


def parse_decimal(text: str) -> Decimal | None:
    """10진 문자열 → Decimal (형식 오류 또는 NaN/Infinity는 None)"""
    try:
        number = Decimal(text.strip())
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number
