"""
DSL 입력 빌더

with_* 메서드 체이닝으로 값을 채운 뒤 build()로 불변 모델 생성.
빌더는 한 번만 build 가능 (이후 사용 시 BuilderConsumedError).
빌드된 모델은 불변이므로 다른 스레드로 넘겨도 안전.

사용 예:
    send = (
        SendBuilder("USD", "100.00")
        .add_source(external_account_reference("USD"))
        .add_destination(FromToBuilder("acc-2").with_description("deposit"))
        .build()
    )
    transaction = (
        TransactionBuilder()
        .with_send(send)
        .with_description("Customer deposit")
        .with_code("DEPOSIT_001")
        .build(validate=True)
    )
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

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
from core.utils.metadata_tags import tags_to_metadata
from core.validation.rules import external_account_reference

if TYPE_CHECKING:
    from core.types import ValidationConfig

NumberLike = str | Decimal | int


class BuilderConsumedError(RuntimeError):
    """이미 build된 빌더 재사용"""

    pass


class _Builder:
    """빌더 공통: 1회 사용 보장"""

    _consumed: bool = False

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(f"{type(self).__name__} has already been built")

    def _consume(self) -> None:
        self._ensure_open()
        self._consumed = True


class FromToBuilder(_Builder):
    """FromTo 레그 빌더"""

    def __init__(self, account: str) -> None:
        self._account = account
        self._amount: Amount | None = None
        self._share: Share | None = None
        self._rate: Rate | None = None
        self._remaining = ""
        self._description = ""
        self._chart_of_accounts = ""
        self._metadata: dict[str, Any] | None = None

    def with_amount(self, value: NumberLike, asset: str = "") -> FromToBuilder:
        """명시 금액 지정"""
        self._ensure_open()
        self._amount = Amount(value=value, asset=asset)  # type: ignore[arg-type]
        return self

    def with_share(self, percentage: int, percentage_of_percentage: int = 0) -> FromToBuilder:
        """비율 지정"""
        self._ensure_open()
        self._share = Share(
            percentage=percentage,
            percentage_of_percentage=percentage_of_percentage,
        )
        return self

    def with_rate(
        self,
        from_: str,
        to: str,
        value: NumberLike,
        external_id: str = "",
    ) -> FromToBuilder:
        """환율 지정"""
        self._ensure_open()
        self._rate = Rate(from_=from_, to=to, value=value, external_id=external_id)  # type: ignore[arg-type]
        return self

    def with_remaining(self, remaining: str) -> FromToBuilder:
        self._ensure_open()
        self._remaining = remaining
        return self

    def with_description(self, description: str) -> FromToBuilder:
        self._ensure_open()
        self._description = description
        return self

    def with_chart_of_accounts(self, chart_of_accounts: str) -> FromToBuilder:
        self._ensure_open()
        self._chart_of_accounts = chart_of_accounts
        return self

    def with_metadata(self, metadata: dict[str, Any] | None) -> FromToBuilder:
        self._ensure_open()
        self._metadata = dict(metadata) if metadata is not None else None
        return self

    def build(self) -> FromTo:
        """FromTo 생성"""
        self._consume()
        return FromTo(
            account=self._account,
            amount=self._amount,
            share=self._share,
            rate=self._rate,
            remaining=self._remaining,
            description=self._description,
            chart_of_accounts=self._chart_of_accounts,
            metadata=self._metadata,
        )


LegLike = FromTo | FromToBuilder | str


def _to_leg(entry: LegLike) -> FromTo:
    """FromTo / 빌더 / 계정 문자열 → FromTo"""
    if isinstance(entry, FromTo):
        return entry
    if isinstance(entry, FromToBuilder):
        return entry.build()
    return FromTo(account=entry)


class SendBuilder(_Builder):
    """Send 빌더

    source/distribute는 레그나 remaining이 하나라도 지정된 경우에만 생성
    (아무것도 지정하지 않으면 None → 검증 단계에서 오류).
    """

    def __init__(self, asset: str, value: NumberLike) -> None:
        self._asset = asset
        self._value = value
        self._sources: list[FromTo] = []
        self._destinations: list[FromTo] = []
        self._source_remaining = ""
        self._distribute_remaining = ""

    def add_source(self, entry: LegLike) -> SendBuilder:
        """출금 레그 추가 (순서 유지)"""
        self._ensure_open()
        self._sources.append(_to_leg(entry))
        return self

    def add_destination(self, entry: LegLike) -> SendBuilder:
        """입금 레그 추가 (순서 유지)"""
        self._ensure_open()
        self._destinations.append(_to_leg(entry))
        return self

    def with_source_remaining(self, account: str) -> SendBuilder:
        self._ensure_open()
        self._source_remaining = account
        return self

    def with_distribute_remaining(self, account: str) -> SendBuilder:
        self._ensure_open()
        self._distribute_remaining = account
        return self

    def build(self) -> Send:
        """Send 생성"""
        self._consume()

        source = None
        if self._sources or self._source_remaining:
            source = Source(from_=tuple(self._sources), remaining=self._source_remaining)

        distribute = None
        if self._destinations or self._distribute_remaining:
            distribute = Distribute(
                to=tuple(self._destinations),
                remaining=self._distribute_remaining,
            )

        return Send(
            asset=self._asset,
            value=self._value,  # type: ignore[arg-type]
            source=source,
            distribute=distribute,
        )


class TransactionBuilder(_Builder):
    """TransactionDSLInput 빌더"""

    def __init__(self) -> None:
        self._send: Send | None = None
        self._description = ""
        self._chart_of_accounts_group_name = ""
        self._code = ""
        self._pending = False
        self._metadata: dict[str, Any] | None = None

    @classmethod
    def deposit(cls, asset: str, value: NumberLike, account: str) -> TransactionBuilder:
        """외부 → 내부 계정 입금 거래 빌더 생성"""
        send = (
            SendBuilder(asset, value)
            .add_source(external_account_reference(asset))
            .add_destination(account)
            .build()
        )
        return cls().with_send(send)

    @classmethod
    def withdrawal(cls, asset: str, value: NumberLike, account: str) -> TransactionBuilder:
        """내부 → 외부 계정 출금 거래 빌더 생성"""
        send = (
            SendBuilder(asset, value)
            .add_source(account)
            .add_destination(external_account_reference(asset))
            .build()
        )
        return cls().with_send(send)

    @classmethod
    def transfer(
        cls,
        asset: str,
        value: NumberLike,
        from_account: str,
        to_account: str,
    ) -> TransactionBuilder:
        """내부 계정 간 이체 거래 빌더 생성"""
        send = (
            SendBuilder(asset, value)
            .add_source(from_account)
            .add_destination(to_account)
            .build()
        )
        return cls().with_send(send)

    def with_send(self, send: Send | SendBuilder) -> TransactionBuilder:
        self._ensure_open()
        self._send = send.build() if isinstance(send, SendBuilder) else send
        return self

    def with_description(self, description: str) -> TransactionBuilder:
        self._ensure_open()
        self._description = description
        return self

    def with_chart_of_accounts_group_name(self, name: str) -> TransactionBuilder:
        self._ensure_open()
        self._chart_of_accounts_group_name = name
        return self

    def with_code(self, code: str) -> TransactionBuilder:
        self._ensure_open()
        self._code = code
        return self

    def with_pending(self, pending: bool = True) -> TransactionBuilder:
        self._ensure_open()
        self._pending = pending
        return self

    def with_metadata(self, metadata: dict[str, Any] | None) -> TransactionBuilder:
        """메타데이터 지정 (복사본 보관, 기존 태그 포함 덮어씀)"""
        self._ensure_open()
        self._metadata = dict(metadata) if metadata is not None else None
        return self

    def with_tags(self, tags: list[str]) -> TransactionBuilder:
        """메타데이터 "tags" 키 설정"""
        self._ensure_open()
        self._metadata = tags_to_metadata(self._metadata, tags)
        return self

    def build(
        self,
        validate: bool = False,
        config: ValidationConfig | None = None,
    ) -> TransactionDSLInput:
        """TransactionDSLInput 생성

        Args:
            validate: True면 생성 직후 검증
            config: 검증 설정 (validate=True일 때만 사용)

        Raises:
            BuilderConsumedError: 이미 build된 빌더
            TransactionValidationError: validate=True이고 검증 실패
        """
        self._consume()
        transaction = TransactionDSLInput(
            send=self._send,
            description=self._description,
            chart_of_accounts_group_name=self._chart_of_accounts_group_name,
            code=self._code,
            pending=self._pending,
            metadata=self._metadata,
        )
        if validate:
            transaction.validate(config)
        return transaction
