"""
메타데이터 검증

설정(ValidationConfig) 기반 메타데이터 검증기.
- 키: 비어 있으면 안 됨, 최대 길이 제한
- 값: str / bool / int / float / Decimal / None, 중첩 dict / list (strict 모드에서는 스칼라만)
- 문자열 값 길이 제한, 숫자 범위 제한(NaN/Infinity 불가), 전체 크기 제한

설정을 넘기지 않아도 기본 ValidationConfig 한도(키 64자, 문자열 256자, 전체 4096)를 적용.
백엔드 타입 검사보다 엄격하며, 한도를 바꾸려면 ValidationConfig 또는 sdk.yaml의 validation 섹션 사용.
"""

from decimal import Decimal
from typing import Any

from core.types import ValidationConfig
from core.validation.errors import BoundError, FormatError

# 숫자 메타데이터 허용 범위
NUMERIC_MIN = Decimal("-9999999999")
NUMERIC_MAX = Decimal("9999999999")

# 스칼라 값의 대략적 크기 (bytes)
SCALAR_SIZE = 8

SCALAR_TYPES = (str, bool, int, float, Decimal)


class MetadataValidator:
    """설정 가능한 메타데이터 검증기

    사용 예:
        validator = MetadataValidator(ValidationConfig(max_metadata_size=8192))
        validator.validate(metadata)
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self.config = config or ValidationConfig()

    def validate(self, metadata: Any) -> None:
        """메타데이터 검증

        None은 유효 (메타데이터 없음).

        Raises:
            FormatError: 매핑이 아니거나 지원하지 않는 값 타입
            BoundError: 빈 키, 길이/크기 초과
        """
        if metadata is None:
            return
        if not isinstance(metadata, dict):
            raise FormatError(f"metadata must be a mapping, got {type(metadata).__name__}")

        self._validate_mapping(metadata)

        total_size = self._measure(metadata)
        if total_size > self.config.max_metadata_size:
            raise BoundError(
                "total metadata size exceeds maximum allowed size of "
                f"{self.config.max_metadata_size} bytes"
            )

    def _validate_mapping(self, metadata: dict[Any, Any]) -> None:
        for key, value in metadata.items():
            self._validate_key(key)
            self._validate_value(key, value)

    def _validate_key(self, key: Any) -> None:
        if not isinstance(key, str):
            raise FormatError(f"metadata keys must be strings, got {type(key).__name__}")
        if key == "":
            raise BoundError("metadata keys cannot be empty")
        if len(key) > self.config.max_key_length:
            raise BoundError(
                f"metadata key '{key}' exceeds maximum length of "
                f"{self.config.max_key_length} characters"
            )

    def _validate_value(self, key: str, value: Any) -> None:
        if value is None:
            return

        if isinstance(value, str):
            if len(value) > self.config.max_string_length:
                raise BoundError(
                    f"metadata string value for key '{key}' exceeds maximum length of "
                    f"{self.config.max_string_length} characters"
                )
            return

        # bool은 int의 하위 타입이므로 숫자 범위 검사에서 제외
        if isinstance(value, bool):
            return

        if isinstance(value, (int, float, Decimal)):
            number = Decimal(str(value))
            if not number.is_finite():
                raise FormatError(
                    f"metadata numeric value for key '{key}' must be finite, got {value}"
                )
            if number < NUMERIC_MIN or number > NUMERIC_MAX:
                raise BoundError(
                    f"metadata numeric value for key '{key}' is outside allowed range "
                    f"({NUMERIC_MIN} to {NUMERIC_MAX})"
                )
            return

        if self.config.strict_mode:
            raise FormatError(
                f"metadata value for key '{key}' has unsupported type: {type(value).__name__} "
                "(strict mode allows string, number, boolean, or null)"
            )

        if isinstance(value, dict):
            try:
                self._validate_mapping(value)
            except (BoundError, FormatError) as e:
                raise e.wrap(f"invalid nested metadata at key '{key}'") from e
            return

        if isinstance(value, list):
            for index, item in enumerate(value):
                if isinstance(item, dict):
                    try:
                        self._validate_mapping(item)
                    except (BoundError, FormatError) as e:
                        raise e.wrap(
                            f"invalid nested metadata in array at key '{key}', index {index}"
                        ) from e
                elif item is not None and not isinstance(item, SCALAR_TYPES + (list,)):
                    raise FormatError(
                        f"invalid metadata array item type at index {index} for key '{key}': "
                        f"{type(item).__name__}"
                    )
            return

        raise FormatError(
            f"invalid metadata value type for key '{key}': {type(value).__name__} "
            "(must be string, number, boolean, object, array, or null)"
        )

    def _measure(self, value: Any) -> int:
        """대략적 크기 계산 (키 길이 + 문자열 길이 + 스칼라 고정 크기)"""
        if isinstance(value, dict):
            return sum(len(str(k)) + self._measure(v) for k, v in value.items())
        if isinstance(value, list):
            return sum(self._measure(item) for item in value)
        if isinstance(value, str):
            return len(value)
        if value is None:
            return 0
        return SCALAR_SIZE


_default_validator = MetadataValidator()


def validate_metadata(metadata: Any, config: ValidationConfig | None = None) -> None:
    """메타데이터 검증 (기본 설정 또는 지정 설정)

    Raises:
        FormatError, BoundError
    """
    validator = _default_validator if config is None else MetadataValidator(config)
    validator.validate(metadata)
