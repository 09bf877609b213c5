"""
거래 DSL 검증기

전송 전에 구조/의미 오류를 걸러냄. 규칙은 아래 순서로 적용하고 첫 번째 실패에서 중단.

1. Send asset: 필수 + 자산 코드 형식
2. Send value: 0보다 큰 10진 문자열
3. source.from: 1개 이상, 각 account 필수
4. distribute.to: 1개 이상, 각 account 필수
5. 외부 계정(@...): @external/<ASSET> 형식 + ASSET == Send asset
6. 최상위: description/chartOfAccountsGroupName 길이, code 형식, metadata
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from core.constants import Limits
from core.transaction.numeric import parse_decimal
from core.types import AccountKind, LegSide
from core.validation.errors import (
    AssetMismatchError,
    BoundError,
    FormatError,
    RequiredFieldError,
    TransactionValidationError,
)
from core.validation.metadata import validate_metadata
from core.validation.rules import (
    account_kind,
    match_external_account,
    validate_asset_code,
    validate_transaction_code,
)

if TYPE_CHECKING:
    from core.transaction.types import FromTo, Send, TransactionDSLInput
    from core.types import ValidationConfig

logger = logging.getLogger(__name__)


def _validate_asset(asset: str) -> None:
    if not asset:
        raise RequiredFieldError("asset is required")
    validate_asset_code(asset)


def _validate_value(value: str) -> None:
    if value == "":
        raise RequiredFieldError("value must be greater than 0")

    number = parse_decimal(value)
    if number is None:
        raise FormatError(f"invalid value format: {value}")

    if number <= 0:
        raise BoundError("value must be greater than 0")


def _validate_legs(entries: Sequence[FromTo] | None, side: LegSide) -> None:
    """레그 목록 구조 검증 (비어 있지 않음 + account 필수)"""
    if not entries:
        raise RequiredFieldError(f"{side.value} must contain at least one entry")

    for index, entry in enumerate(entries):
        if not entry.account:
            raise RequiredFieldError(f"{side.value}[{index}].account is required")


def _validate_external_accounts(
    entries: Sequence[FromTo],
    side: LegSide,
    asset: str,
) -> None:
    """외부 계정 참조 형식 및 자산 코드 교차 검증"""
    for index, entry in enumerate(entries):
        if account_kind(entry.account) != AccountKind.EXTERNAL:
            continue

        external_asset = match_external_account(entry.account)
        if external_asset is None:
            raise FormatError(
                f"invalid external account format in {side.value}[{index}]: {entry.account}"
            )

        if external_asset != asset:
            raise AssetMismatchError(
                f"asset code mismatch in {side.value}[{index}]: "
                f"transaction uses {asset} but external account uses {external_asset}"
            )


def validate_send(send: Send) -> None:
    """Send 검증

    Raises:
        RequiredFieldError: asset/value/account 누락, source/distribute 비어 있음
        FormatError: 자산 코드, value, 외부 계정 형식 오류
        BoundError: value가 0 이하
        AssetMismatchError: 외부 계정 자산 ≠ 거래 자산
    """
    _validate_asset(send.asset)
    _validate_value(send.value)

    sources = send.source.from_ if send.source is not None else ()
    destinations = send.distribute.to if send.distribute is not None else ()

    _validate_legs(sources, LegSide.SOURCE)
    _validate_legs(destinations, LegSide.DESTINATION)

    _validate_external_accounts(sources, LegSide.SOURCE, send.asset)
    _validate_external_accounts(destinations, LegSide.DESTINATION, send.asset)


def _check_transaction(
    transaction: TransactionDSLInput,
    config: ValidationConfig | None,
) -> None:
    if transaction.send is None:
        raise RequiredFieldError("send is required")

    try:
        validate_send(transaction.send)
    except TransactionValidationError as e:
        raise e.wrap("invalid send operation") from e

    if len(transaction.description) > Limits.DESCRIPTION_MAX_LEN:
        raise BoundError(
            f"description must be at most {Limits.DESCRIPTION_MAX_LEN} characters"
        )

    if len(transaction.chart_of_accounts_group_name) > Limits.CHART_OF_ACCOUNTS_GROUP_NAME_MAX_LEN:
        raise BoundError(
            "chartOfAccountsGroupName must be at most "
            f"{Limits.CHART_OF_ACCOUNTS_GROUP_NAME_MAX_LEN} characters"
        )

    if transaction.code:
        validate_transaction_code(transaction.code)

    if transaction.metadata:
        try:
            validate_metadata(transaction.metadata, config)
        except TransactionValidationError as e:
            raise e.wrap("invalid metadata") from e


def validate_transaction(
    transaction: TransactionDSLInput,
    config: ValidationConfig | None = None,
) -> None:
    """TransactionDSLInput 검증

    오류는 하나만 보고 (집계하지 않음). 수정 후 다시 호출해야 다음 오류 확인 가능.

    Args:
        transaction: 검증할 입력
        config: 메타데이터 검증 설정 (None이면 기본값)

    Raises:
        TransactionValidationError: 검증 실패 (하위 분류 유지)
    """
    try:
        _check_transaction(transaction, config)
    except TransactionValidationError as e:
        logger.debug(f"거래 검증 실패 ({type(e).__name__}): {e}")
        raise
