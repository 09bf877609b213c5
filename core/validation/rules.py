"""
형식 검증 규칙

자산 코드, 거래 코드, 외부 계정 참조 검증.
모델에 의존하지 않는 순수 함수만 둠 (core.transaction에서 사용).
"""

from core.constants import Defaults, Patterns
from core.types import AccountKind
from core.validation.errors import FormatError, RequiredFieldError


def validate_asset_code(asset_code: str) -> None:
    """자산 코드 검증

    자산 코드는 대문자 3~4자 (예: USD, EUR, BTC).

    Raises:
        RequiredFieldError: 빈 문자열
        FormatError: 형식 불일치
    """
    if not asset_code:
        raise RequiredFieldError("asset code is required")

    if not Patterns.ASSET_CODE.fullmatch(asset_code):
        raise FormatError(
            f"invalid asset code format: {asset_code} (must be 3-4 uppercase letters)"
        )


def validate_transaction_code(code: str) -> None:
    """거래 코드 검증

    영숫자 + 밑줄/하이픈, 최대 100자. 공백 불가.

    Raises:
        RequiredFieldError: 빈 문자열
        FormatError: 형식 불일치
    """
    if not code:
        raise RequiredFieldError("transaction code cannot be empty")

    if not Patterns.TRANSACTION_CODE.fullmatch(code):
        raise FormatError(
            f"invalid transaction code format: {code} "
            "(must be alphanumeric with optional underscores and hyphens, max 100 chars)"
        )


def account_kind(account: str) -> AccountKind:
    """계정 참조 종류 판별

    '@'로 시작하면 외부 계정 참조로 취급 (형식은 별도 검증).
    """
    if account.startswith("@"):
        return AccountKind.EXTERNAL
    return AccountKind.INTERNAL


def match_external_account(account: str) -> str | None:
    """외부 계정 참조에서 자산 코드 추출

    Returns:
        @external/<ASSET> 형식이면 ASSET, 아니면 None
    """
    match = Patterns.EXTERNAL_ACCOUNT.fullmatch(account)
    if match is None:
        return None
    return match.group(1)


def external_account_reference(asset_code: str) -> str:
    """자산 코드로 외부 계정 참조 생성

    예: "USD" → "@external/USD"
    """
    return f"{Defaults.EXTERNAL_ACCOUNT_PREFIX}{asset_code}"
