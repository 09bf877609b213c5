"""
설정 로더

sdk.yaml 로드 및 검증/로깅 설정 생성
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths
from core.types import ValidationConfig


@dataclass(frozen=True)
class LoggingConfig:
    """로깅 설정

    불변 데이터 구조로 설정 변경 방지
    """

    level: str = Defaults.LOG_LEVEL
    file: Path | None = None


@dataclass(frozen=True)
class SdkConfig:
    """SDK 설정 (sdk.yaml에서 로드)"""

    validation: ValidationConfig = field(default_factory=ValidationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _parse_validation(data: Any) -> ValidationConfig:
    """validation 섹션 → ValidationConfig

    알 수 없는 키는 오류로 처리 (오타 방지).
    """
    if data is None:
        return ValidationConfig()
    if not isinstance(data, dict):
        raise ConfigLoadError("sdk.yaml의 'validation' 섹션은 매핑이어야 합니다")

    known = {f.name for f in fields(ValidationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigLoadError(f"sdk.yaml의 validation 섹션에 알 수 없는 키: {unknown}")

    try:
        return ValidationConfig(**data)
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(f"validation 설정이 유효하지 않습니다: {e}") from e


def _parse_logging(data: Any) -> LoggingConfig:
    """logging 섹션 → LoggingConfig"""
    if data is None:
        return LoggingConfig()
    if not isinstance(data, dict):
        raise ConfigLoadError("sdk.yaml의 'logging' 섹션은 매핑이어야 합니다")

    level = data.get("level", Defaults.LOG_LEVEL)
    if not isinstance(level, str) or not level:
        raise ConfigLoadError(f"유효하지 않은 로그 레벨입니다: {level!r}")

    file_value = data.get("file")
    log_file = Path(file_value) if file_value else None

    return LoggingConfig(level=level.upper(), file=log_file)


def load_config(path: Path | None = None) -> SdkConfig:
    """sdk.yaml 파일 로드

    Args:
        path: sdk.yaml 경로 (None이면 기본 경로 사용, 기본 파일이 없으면 기본값)

    Returns:
        SdkConfig 인스턴스

    Raises:
        ConfigLoadError: 지정한 파일이 없거나 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SDK_CONFIG_FILE
        if not path.exists():
            return SdkConfig()

    if not path.exists():
        raise ConfigLoadError(f"sdk.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"sdk.yaml 파싱 실패: {e}") from e

    # 빈 파일은 기본값
    if data is None:
        return SdkConfig()

    if not isinstance(data, dict):
        raise ConfigLoadError("sdk.yaml 최상위는 매핑이어야 합니다")

    return SdkConfig(
        validation=_parse_validation(data.get("validation")),
        logging=_parse_logging(data.get("logging")),
    )


class Settings:
    """SDK 설정 (싱글턴 패턴)

    sdk.yaml을 한 번만 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: SdkConfig | None = None

    def __new__(cls, config_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(config_path)

    @property
    def validation(self) -> ValidationConfig:
        """검증 설정"""
        assert self._config is not None
        return self._config.validation

    @property
    def logging(self) -> LoggingConfig:
        """로깅 설정"""
        assert self._config is not None
        return self._config.logging

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(config_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        config_path: sdk.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(config_path)
