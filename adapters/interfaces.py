"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ITransactionTransport(Protocol):
    """거래 전송 인터페이스

    와이어 맵을 백엔드로 보내고 백엔드가 반환한 와이어 맵을 돌려줌.
    HTTP, 인증, 재시도는 구현체 책임.
    """

    def send_transaction(self, payload: dict[str, Any]) -> dict[str, Any]:
        """DSL 거래 전송

        Args:
            payload: to_transaction_map() 결과

        Returns:
            백엔드 응답 (JSON 디코딩된 맵)
        """
        ...
