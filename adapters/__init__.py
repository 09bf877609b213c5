"""
어댑터 레이어

외부 시스템(전송 계층, JSON 와이어 포맷)과의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import ITransactionTransport

__all__ = [
    # Interfaces
    "ITransactionTransport",
]
