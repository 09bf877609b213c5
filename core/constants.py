"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

import re
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Patterns:
    """식별자 형식 정규식

    Ledger 백엔드가 허용하는 형식과 동일하게 유지.
    """

    # 자산 코드: 대문자 3~4자 (USD, EUR, BTC, USDT)
    ASSET_CODE: re.Pattern[str] = re.compile(r"^[A-Z]{3,4}\Z")

    # 거래 코드: 영숫자 + 밑줄/하이픈, 최대 100자
    TRANSACTION_CODE: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_-]{1,100}\Z")

    # 외부 계정: @external/<ASSET_CODE>
    EXTERNAL_ACCOUNT: re.Pattern[str] = re.compile(r"^@external/([A-Z]{3,4})\Z")


class Limits:
    """길이/크기 제한"""

    DESCRIPTION_MAX_LEN: int = 256
    CHART_OF_ACCOUNTS_GROUP_NAME_MAX_LEN: int = 256

    # 메타데이터 기본값 (ValidationConfig로 덮어쓰기 가능)
    METADATA_KEY_MAX_LEN: int = 64
    METADATA_MAX_SIZE: int = 4096
    METADATA_STRING_MAX_LEN: int = 256


class Defaults:
    """기본값 상수"""

    LOG_LEVEL: str = "INFO"
    EXTERNAL_ACCOUNT_PREFIX: str = "@external/"
    METADATA_TAGS_KEY: str = "tags"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SDK_CONFIG_FILE: Path = CONFIG_DIR / "sdk.yaml"
