"""
DSL 모델 → 와이어 맵 변환

JSON 인코딩용 문자열 키 딕셔너리 생성.
선택 필드는 값이 있을 때만 포함 (null 대신 키 생략 = "미설정").
- description, metadata: 항상 포함
- chartOfAccountsGroupName, code: 빈 문자열이 아닐 때만
- pending: True일 때만
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
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


def _copy_metadata(metadata: dict[str, Any] | None) -> dict[str, Any] | None:
    """메타데이터 복사 (결과 맵이 원본과 공유되지 않도록)"""
    if metadata is None:
        return None
    return copy.deepcopy(metadata)


def amount_to_map(amount: Amount) -> dict[str, Any]:
    """Amount → {asset, value}"""
    return {
        "asset": amount.asset,
        "value": amount.value,
    }


def share_to_map(share: Share) -> dict[str, Any]:
    """Share → {percentage, percentageOfPercentage}"""
    return {
        "percentage": share.percentage,
        "percentageOfPercentage": share.percentage_of_percentage,
    }


def rate_to_map(rate: Rate) -> dict[str, Any]:
    """Rate → {from, to, value, externalId}"""
    return {
        "from": rate.from_,
        "to": rate.to,
        "value": rate.value,
        "externalId": rate.external_id,
    }


def from_to_to_map(entry: FromTo) -> dict[str, Any]:
    """FromTo → 레그 맵

    account는 항상 포함, 나머지는 값이 있을 때만.
    """
    result: dict[str, Any] = {
        "account": entry.account,
    }

    if entry.amount is not None:
        result["amount"] = amount_to_map(entry.amount)

    if entry.remaining:
        result["remaining"] = entry.remaining

    if entry.description:
        result["description"] = entry.description

    if entry.chart_of_accounts:
        result["chartOfAccounts"] = entry.chart_of_accounts

    if entry.metadata is not None:
        result["metadata"] = _copy_metadata(entry.metadata)

    if entry.share is not None:
        result["share"] = share_to_map(entry.share)

    if entry.rate is not None:
        result["rate"] = rate_to_map(entry.rate)

    return result


def source_to_map(source: Source) -> dict[str, Any]:
    """Source → {remaining?, from?}"""
    result: dict[str, Any] = {}

    if source.remaining:
        result["remaining"] = source.remaining

    if source.from_:
        result["from"] = [from_to_to_map(entry) for entry in source.from_]

    return result


def distribute_to_map(distribute: Distribute) -> dict[str, Any]:
    """Distribute → {remaining?, to?}"""
    result: dict[str, Any] = {}

    if distribute.remaining:
        result["remaining"] = distribute.remaining

    if distribute.to:
        result["to"] = [from_to_to_map(entry) for entry in distribute.to]

    return result


def send_to_map(send: Send) -> dict[str, Any]:
    """Send → {asset, value, source?, distribute?}"""
    result: dict[str, Any] = {
        "asset": send.asset,
        "value": send.value,
    }

    if send.source is not None:
        result["source"] = source_to_map(send.source)

    if send.distribute is not None:
        result["distribute"] = distribute_to_map(send.distribute)

    return result


def to_transaction_map(transaction: TransactionDSLInput | None) -> dict[str, Any] | None:
    """TransactionDSLInput → 와이어 맵

    Args:
        transaction: 변환할 입력 (None이면 None 반환)

    Returns:
        JSON 인코딩 가능한 딕셔너리 (원본과 독립적인 스냅샷)
    """
    if transaction is None:
        return None

    result: dict[str, Any] = {
        "description": transaction.description,
        "metadata": _copy_metadata(transaction.metadata),
    }

    if transaction.chart_of_accounts_group_name:
        result["chartOfAccountsGroupName"] = transaction.chart_of_accounts_group_name

    if transaction.code:
        result["code"] = transaction.code

    if transaction.pending:
        result["pending"] = True

    if transaction.send is not None:
        result["send"] = send_to_map(transaction.send)

    return result
