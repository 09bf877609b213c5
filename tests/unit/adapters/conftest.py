"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

import pytest

from adapters.mock.transport import MockTransactionTransport


@pytest.fixture
def transport() -> MockTransactionTransport:
    """float 디코딩 Mock 전송 (일반 JSON 클라이언트 동작)"""
    return MockTransactionTransport()


@pytest.fixture
def failing_transport() -> MockTransactionTransport:
    """항상 실패하는 Mock 전송"""
    return MockTransactionTransport(should_fail=True)
