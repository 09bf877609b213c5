"""
로깅 설정 유틸리티

SDK를 사용하는 애플리케이션에서 호출하는 공통 로깅 설정.
- 콘솔: 지정 레벨 (기본 INFO)
- 파일: 선택 사항 (TimedRotatingFileHandler, daily)

SDK 모듈은 logging.getLogger(__name__)만 사용하고 핸들러를 직접 붙이지 않음.

사용법:
    from core.logging import setup_logging
    setup_logging("DEBUG")                        # 콘솔만
    setup_logging("INFO", log_file=Path("sdk.log"))  # 콘솔 + 파일
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


# 로그 설정 상수
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 최대 7일치 파일 유지

# SDK 패키지 로거 이름
SDK_LOGGERS = [
    "core",
    "adapters",
]


def _resolve_level(level: int | str) -> int:
    """로그 레벨 문자열/정수 → 정수 레벨"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> logging.Logger:
    """로깅 설정 초기화

    SDK 패키지 로거(core, adapters)에 핸들러를 설정.
    루트 로거는 건드리지 않으므로 호스트 애플리케이션 설정과 충돌하지 않음.

    Args:
        level: 로그 레벨 ("DEBUG", "INFO" 또는 logging 상수)
        log_file: 파일 로그 경로 (None이면 콘솔만)

    Returns:
        설정된 "core" Logger
    """
    resolved = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = []

    # 1. 콘솔 핸들러 (StreamHandler)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # 2. 파일 핸들러 (TimedRotatingFileHandler - daily)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=log_file,
            when="midnight",          # 매일 자정에 롤링
            interval=1,               # 1일 간격
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.suffix = "%Y-%m-%d"
        file_handler.setLevel(resolved)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for logger_name in SDK_LOGGERS:
        sdk_logger = logging.getLogger(logger_name)
        sdk_logger.setLevel(resolved)

        # 기존 핸들러 제거 (중복 방지)
        for handler in list(sdk_logger.handlers):
            sdk_logger.removeHandler(handler)
            handler.close()

        for handler in handlers:
            sdk_logger.addHandler(handler)
        sdk_logger.propagate = False

    core_logger = logging.getLogger("core")
    core_logger.debug(f"로깅 초기화 완료: level={logging.getLevelName(resolved)}")
    if log_file is not None:
        core_logger.debug(f"  - 파일: {log_file} (daily rotation, {LOG_FILE_BACKUP_COUNT}일 보관)")

    return core_logger
