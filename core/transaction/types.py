"""
거래 DSL 모델

Send → Source/Distribute → From/To 구조로 다자간 균형 이체를 표현.
모든 모델은 불변(frozen). 생성은 생성자 또는 core.transaction.builder 사용.

금액(value)은 항상 10진 문자열로 보관 (float 금지).
Decimal/int가 들어오면 생성 시 문자열로 정규화.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from core.transaction.numeric import decimal_text, parse_decimal

if TYPE_CHECKING:
    from core.types import ValidationConfig


def _normalize_value(instance: object, name: str) -> None:
    """value 필드를 10진 문자열로 정규화 (frozen 우회)"""
    value = getattr(instance, name)
    if value is None:
        object.__setattr__(instance, name, "")
    elif not isinstance(value, str):
        object.__setattr__(instance, name, decimal_text(value))


@dataclass(frozen=True)
class Amount:
    """레그 금액

    Attributes:
        value: 10진 문자열 금액 (예: "100.50")
        asset: 자산 코드 (예: USD)
    """

    value: str
    asset: str = ""

    def __post_init__(self) -> None:
        _normalize_value(self, "value")


@dataclass(frozen=True)
class Share:
    """비율 지정 (Amount 대신 사용)

    Attributes:
        percentage: 비율 (%)
        percentage_of_percentage: 비율의 비율 (%)
    """

    percentage: int
    percentage_of_percentage: int = 0


@dataclass(frozen=True)
class Rate:
    """환율 (레그 자산이 Send 자산과 다를 때)

    Attributes:
        from_: 원 자산 코드
        to: 대상 자산 코드
        value: 10진 문자열 환율
        external_id: 외부 환율 ID
    """

    from_: str
    to: str
    value: str
    external_id: str = ""

    def __post_init__(self) -> None:
        _normalize_value(self, "value")


@dataclass(frozen=True)
class FromTo:
    """출금/입금 레그

    account는 내부 계정 ID/alias 또는 외부 계정 참조(@external/<ASSET>).
    Amount 또는 Share 중 하나로 크기를 지정 (둘 다 없으면 remaining에 위임).
    """

    account: str
    amount: Amount | None = None
    share: Share | None = None
    rate: Rate | None = None
    remaining: str = ""
    description: str = ""
    chart_of_accounts: str = ""
    metadata: dict[str, Any] | None = None


@dataclass(frozen=True)
class Source:
    """출금 측 (from 레그 목록 + remaining 계정)"""

    from_: tuple[FromTo, ...] = ()
    remaining: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "from_", tuple(self.from_))


@dataclass(frozen=True)
class Distribute:
    """입금 측 (to 레그 목록 + remaining 계정)"""

    to: tuple[FromTo, ...] = ()
    remaining: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "to", tuple(self.to))


@dataclass(frozen=True)
class Send:
    """균형 이체 단위

    Attributes:
        asset: 자산 코드
        value: 10진 문자열 총액
        source: 출금 측
        distribute: 입금 측
    """

    asset: str
    value: str
    source: Source | None = None
    distribute: Distribute | None = None

    def __post_init__(self) -> None:
        _normalize_value(self, "value")

    def validate(self) -> None:
        """Send 검증 (첫 번째 실패 시 예외)

        Raises:
            TransactionValidationError: 검증 실패
        """
        from core.transaction.validation import validate_send

        validate_send(self)


@dataclass(frozen=True)
class TransactionDSLInput:
    """DSL 거래 입력 (최상위)

    Attributes:
        send: 이체 정의 (필수)
        description: 설명 (최대 256자)
        chart_of_accounts_group_name: 계정과목 그룹 (최대 256자)
        code: 거래 코드
        pending: 명시적 커밋 필요 여부
        metadata: 사용자 메타데이터
    """

    send: Send | None = None
    description: str = ""
    chart_of_accounts_group_name: str = ""
    code: str = ""
    pending: bool = False
    metadata: dict[str, Any] | None = field(default=None)

    def validate(self, config: ValidationConfig | None = None) -> None:
        """거래 입력 검증 (첫 번째 실패 시 예외)

        Args:
            config: 메타데이터 검증 설정 (None이면 기본값)

        Raises:
            TransactionValidationError: 검증 실패
        """
        from core.transaction.validation import validate_transaction

        validate_transaction(self, config)

    def to_transaction_map(self) -> dict[str, Any]:
        """와이어 맵으로 변환 (API 요청용)"""
        from core.transaction.marshal import to_transaction_map

        return to_transaction_map(self)

    @classmethod
    def from_transaction_map(cls, data: dict[str, Any] | None) -> TransactionDSLInput | None:
        """와이어 맵에서 복원 (검증하지 않음)"""
        from core.transaction.unmarshal import from_transaction_map

        return from_transaction_map(data)

    # 사전 검증용 접근자

    def get_asset(self) -> str:
        """거래 자산 코드 (send가 없으면 빈 문자열)"""
        if self.send is None:
            return ""
        return self.send.asset

    def get_value(self) -> Decimal:
        """거래 총액 (해석 불가 시 0)"""
        if self.send is None:
            return Decimal("0")
        number = parse_decimal(self.send.value)
        return number if number is not None else Decimal("0")

    def get_source_accounts(self) -> list[str]:
        """출금 계정 목록 (순서 유지)"""
        if self.send is None or self.send.source is None:
            return []
        return [entry.account for entry in self.send.source.from_]

    def get_destination_accounts(self) -> list[str]:
        """입금 계정 목록 (순서 유지)"""
        if self.send is None or self.send.distribute is None:
            return []
        return [entry.account for entry in self.send.distribute.to]

    def get_metadata(self) -> dict[str, Any] | None:
        """메타데이터"""
        return self.metadata
