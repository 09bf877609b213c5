"""
거래 DSL 검증 테스트

규칙 적용 순서, 오류 분류, 메시지 검증.
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from core.transaction.types import (
    Distribute,
    FromTo,
    Send,
    Source,
    TransactionDSLInput,
)
from core.transaction.validation import validate_send, validate_transaction
from core.types import ValidationConfig
from core.validation.errors import (
    AssetMismatchError,
    BoundError,
    FormatError,
    RequiredFieldError,
    TransactionValidationError,
)


def make_send(
    asset: str = "USD",
    value: str = "100",
    sources: list[str] | None = None,
    destinations: list[str] | None = None,
) -> Send:
    """계정 문자열 목록으로 Send 생성"""
    return Send(
        asset=asset,
        value=value,
        source=Source(from_=[FromTo(account=a) for a in (sources or ["acc-1"])]),
        distribute=Distribute(to=[FromTo(account=a) for a in (destinations or ["acc-2"])]),
    )


class TestSendAsset:
    """Send asset 검증"""

    def test_empty_asset(self) -> None:
        """빈 asset은 필수 필드 오류"""
        with pytest.raises(RequiredFieldError, match="asset is required"):
            validate_send(make_send(asset=""))

    @pytest.mark.parametrize("asset", ["usd", "US", "USDTX", "U$D", "12", "USD\n"])
    def test_invalid_asset_format(self, asset: str) -> None:
        """형식 오류는 필수 필드 오류와 구분"""
        with pytest.raises(FormatError, match="invalid asset code format"):
            validate_send(make_send(asset=asset))

    @pytest.mark.parametrize("asset", ["USD", "EUR", "BTC", "USDT"])
    def test_valid_assets(self, asset: str) -> None:
        """대문자 3~4자 허용"""
        validate_send(
            make_send(asset=asset, sources=[f"@external/{asset}"])
        )


class TestSendValue:
    """Send value 검증"""

    @pytest.mark.parametrize("value", ["", "0", "0.00", "-5"])
    def test_non_positive_value(self, value: str) -> None:
        """빈 값, 0, 음수는 모두 같은 메시지"""
        with pytest.raises(TransactionValidationError, match="value must be greater than 0"):
            validate_send(make_send(value=value))

    def test_empty_value_is_required_field_error(self) -> None:
        """빈 값은 필수 필드 오류"""
        with pytest.raises(RequiredFieldError):
            validate_send(make_send(value=""))

    def test_zero_value_is_bound_error(self) -> None:
        """0은 범위 오류"""
        with pytest.raises(BoundError):
            validate_send(make_send(value="0"))

    def test_unparseable_value(self) -> None:
        """10진수가 아닌 값"""
        with pytest.raises(FormatError, match="invalid value format: abc"):
            validate_send(make_send(value="abc"))

    @pytest.mark.parametrize("value", ["1", "0.01", "100.50", "0.00000001"])
    def test_positive_values(self, value: str) -> None:
        """양수는 통과"""
        validate_send(make_send(value=value))

    def test_asset_checked_before_value(self) -> None:
        """asset 오류가 value 오류보다 먼저 보고됨"""
        with pytest.raises(RequiredFieldError, match="asset is required"):
            validate_send(make_send(asset="", value="0"))


class TestSourceAndDistribute:
    """source/distribute 구조 검증"""

    def test_missing_source(self) -> None:
        """source 없음"""
        send = replace(make_send(), source=None)

        with pytest.raises(RequiredFieldError, match="source.from must contain at least one entry"):
            validate_send(send)

    def test_empty_source_from(self) -> None:
        """source.from 비어 있음"""
        send = replace(make_send(), source=Source(from_=[]))

        with pytest.raises(RequiredFieldError, match="source.from must contain at least one entry"):
            validate_send(send)

    def test_missing_distribute(self) -> None:
        """distribute 없음"""
        send = replace(make_send(), distribute=None)

        with pytest.raises(RequiredFieldError, match="distribute.to must contain at least one entry"):
            validate_send(send)

    def test_empty_source_account(self) -> None:
        """source.from[i].account 누락 (인덱스 포함)"""
        send = make_send(sources=["acc-1", ""])

        with pytest.raises(RequiredFieldError, match=r"source\.from\[1\]\.account is required"):
            validate_send(send)

    def test_empty_destination_account(self) -> None:
        """distribute.to[i].account 누락"""
        send = make_send(destinations=[""])

        with pytest.raises(RequiredFieldError, match=r"distribute\.to\[0\]\.account is required"):
            validate_send(send)

    def test_structure_checked_before_external_accounts(self) -> None:
        """distribute 구조 오류가 source 외부 계정 오류보다 먼저"""
        send = replace(make_send(sources=["@bad"]), distribute=None)

        with pytest.raises(RequiredFieldError, match="distribute.to"):
            validate_send(send)


class TestExternalAccounts:
    """외부 계정 참조 검증"""

    @pytest.mark.parametrize(
        "account",
        [
            "@external",
            "@external/",
            "@external/usd",
            "@external/US",
            "@world",
            "@external/USD/x",
            "@external/USD\n",
        ],
    )
    def test_invalid_external_format(self, account: str) -> None:
        """@로 시작하지만 @external/<CODE>가 아님"""
        with pytest.raises(FormatError, match="invalid external account format in source.from"):
            validate_send(make_send(sources=[account]))

    def test_asset_mismatch_in_destination(self) -> None:
        """외부 계정 자산 ≠ 거래 자산"""
        send = make_send(asset="USD", destinations=["@external/EUR"])

        with pytest.raises(AssetMismatchError) as exc_info:
            validate_send(send)

        message = str(exc_info.value)
        assert "asset code mismatch in distribute.to[0]" in message
        assert "transaction uses USD but external account uses EUR" in message

    def test_asset_mismatch_is_not_format_error(self) -> None:
        """불일치는 형식 오류와 별도 분류"""
        send = make_send(asset="USD", sources=["@external/EUR"])

        with pytest.raises(TransactionValidationError) as exc_info:
            validate_send(send)

        assert not isinstance(exc_info.value, FormatError)

    def test_matching_external_accounts(self) -> None:
        """양쪽 모두 일치하는 외부 계정"""
        send = make_send(
            asset="BRL",
            sources=["@external/BRL"],
            destinations=["acc-1", "@external/BRL"],
        )

        validate_send(send)

    def test_internal_accounts_not_checked(self) -> None:
        """@로 시작하지 않으면 외부 계정 검사 대상 아님"""
        validate_send(make_send(sources=["external/EUR"], destinations=["acc@EUR"]))


class TestTransactionEnvelope:
    """TransactionDSLInput 검증"""

    def test_valid_minimal(self, simple_transaction: TransactionDSLInput) -> None:
        """send만 있는 최소 입력"""
        validate_transaction(simple_transaction)

    def test_valid_full(self, full_transaction: TransactionDSLInput) -> None:
        """모든 필드를 채운 입력"""
        validate_transaction(full_transaction)

    def test_missing_send(self) -> None:
        """send 필수"""
        with pytest.raises(RequiredFieldError, match="send is required"):
            validate_transaction(TransactionDSLInput())

    def test_send_errors_are_wrapped(self, simple_transaction: TransactionDSLInput) -> None:
        """Send 오류는 "invalid send operation:" 접두사 + 분류 유지"""
        transaction = replace(
            simple_transaction,
            send=replace(simple_transaction.send, value="0"),
        )

        with pytest.raises(BoundError) as exc_info:
            validate_transaction(transaction)

        assert str(exc_info.value) == "invalid send operation: value must be greater than 0"
        assert isinstance(exc_info.value.__cause__, BoundError)

    def test_description_length(self, simple_transaction: TransactionDSLInput) -> None:
        """description 최대 256자"""
        validate_transaction(replace(simple_transaction, description="d" * 256))

        with pytest.raises(BoundError, match="description must be at most 256 characters"):
            validate_transaction(replace(simple_transaction, description="d" * 257))

    def test_group_name_length(self, simple_transaction: TransactionDSLInput) -> None:
        """chartOfAccountsGroupName 최대 256자"""
        transaction = replace(simple_transaction, chart_of_accounts_group_name="g" * 257)

        with pytest.raises(BoundError, match="chartOfAccountsGroupName must be at most 256"):
            validate_transaction(transaction)

    @pytest.mark.parametrize("code", ["TX 1", "TX#1", "x" * 101, "TX_1\n"])
    def test_invalid_code(self, simple_transaction: TransactionDSLInput, code: str) -> None:
        """공백/특수문자/길이 초과"""
        with pytest.raises(FormatError, match="invalid transaction code format"):
            validate_transaction(replace(simple_transaction, code=code))

    def test_empty_code_is_skipped(self, simple_transaction: TransactionDSLInput) -> None:
        """빈 code는 검사하지 않음"""
        validate_transaction(replace(simple_transaction, code=""))

    def test_metadata_empty_key(self, simple_transaction: TransactionDSLInput) -> None:
        """빈 메타데이터 키"""
        transaction = replace(simple_transaction, metadata={"": "value"})

        with pytest.raises(BoundError, match="invalid metadata: metadata keys cannot be empty"):
            validate_transaction(transaction)

    def test_metadata_uses_config(self, simple_transaction: TransactionDSLInput) -> None:
        """설정한 한도 적용"""
        transaction = replace(simple_transaction, metadata={"note": "x" * 20})

        validate_transaction(transaction)
        with pytest.raises(BoundError, match="invalid metadata"):
            validate_transaction(transaction, ValidationConfig(max_string_length=10))

    def test_default_metadata_limits(self, simple_transaction: TransactionDSLInput) -> None:
        """설정 없이도 기본 한도(키 64자) 적용"""
        validate_transaction(replace(simple_transaction, metadata={"k" * 64: "v"}))

        with pytest.raises(BoundError, match="exceeds maximum length of 64"):
            validate_transaction(replace(simple_transaction, metadata={"k" * 65: "v"}))

    @pytest.mark.parametrize("number", [float("nan"), float("inf"), Decimal("NaN")])
    def test_metadata_non_finite_number(
        self, simple_transaction: TransactionDSLInput, number: object
    ) -> None:
        """NaN/Infinity 메타데이터는 검증 오류 (다른 예외로 새지 않음)"""
        transaction = replace(simple_transaction, metadata={"x": number})

        with pytest.raises(FormatError, match="invalid metadata: .*must be finite"):
            validate_transaction(transaction)

    def test_first_failure_only(self, simple_transaction: TransactionDSLInput) -> None:
        """여러 오류 중 첫 번째만 보고"""
        transaction = replace(
            simple_transaction,
            description="d" * 300,
            code="bad code",
            metadata={"": 1},
        )

        with pytest.raises(BoundError, match="description"):
            validate_transaction(transaction)

    def test_errors_are_value_errors(self) -> None:
        """모든 검증 오류는 ValueError"""
        with pytest.raises(ValueError):
            validate_transaction(TransactionDSLInput())


class TestModelMethods:
    """모델의 validate() 위임"""

    def test_send_validate(self) -> None:
        """Send.validate()"""
        with pytest.raises(AssetMismatchError):
            make_send(sources=["@external/EUR"]).validate()

    def test_transaction_validate(self, simple_send: Send) -> None:
        """TransactionDSLInput.validate()"""
        TransactionDSLInput(send=simple_send).validate()

        with pytest.raises(BoundError, match="value must be greater than 0"):
            TransactionDSLInput(send=replace(simple_send, value="0")).validate()
