"""
Mock 어댑터

테스트용 Mock 구현체.
"""

from adapters.mock.transport import MockTransactionTransport, TransportRecord

__all__ = [
    "MockTransactionTransport",
    "TransportRecord",
]
