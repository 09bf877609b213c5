"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from dataclasses import dataclass
from enum import Enum

from core.constants import Limits


class LegSide(str, Enum):
    """거래 레그 위치

    값은 검증 오류 메시지에 그대로 쓰이는 경로 표기.
    """

    SOURCE = "source.from"
    DESTINATION = "distribute.to"


class AccountKind(str, Enum):
    """계정 참조 종류"""

    INTERNAL = "INTERNAL"  # 내부 계정 ID 또는 alias
    EXTERNAL = "EXTERNAL"  # @external/<ASSET>


@dataclass(frozen=True)
class ValidationConfig:
    """검증 설정 (불변)

    메타데이터 검증 한도. 설정 파일(sdk.yaml)의 validation 섹션에서 로드 가능.
    """

    max_metadata_size: int = Limits.METADATA_MAX_SIZE
    max_string_length: int = Limits.METADATA_STRING_MAX_LEN
    max_key_length: int = Limits.METADATA_KEY_MAX_LEN
    strict_mode: bool = False

    def __post_init__(self) -> None:
        """유효성 검증"""
        if self.max_metadata_size <= 0:
            raise ValueError(
                f"max metadata size must be positive, got {self.max_metadata_size}"
            )
        if self.max_string_length <= 0:
            raise ValueError(
                f"max string length must be positive, got {self.max_string_length}"
            )
        if self.max_key_length <= 0:
            raise ValueError(
                f"max key length must be positive, got {self.max_key_length}"
            )
