"""
검증 패키지

모델에 의존하지 않는 형식 검증 함수와 오류 타입.
"""

from core.validation.errors import (
    AssetMismatchError,
    BoundError,
    FormatError,
    RequiredFieldError,
    TransactionValidationError,
)
from core.validation.metadata import MetadataValidator, validate_metadata
from core.validation.rules import (
    account_kind,
    external_account_reference,
    match_external_account,
    validate_asset_code,
    validate_transaction_code,
)

__all__ = [
    # 오류
    "TransactionValidationError",
    "RequiredFieldError",
    "FormatError",
    "AssetMismatchError",
    "BoundError",
    # 규칙
    "validate_asset_code",
    "validate_transaction_code",
    "account_kind",
    "match_external_account",
    "external_account_reference",
    # 메타데이터
    "MetadataValidator",
    "validate_metadata",
]
