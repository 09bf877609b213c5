"""
Mock 거래 전송

테스트용 Mock Transport.
ITransactionTransport Protocol 준수.
실제 전송처럼 JSON 인코딩 → 디코딩을 거쳐 응답을 돌려줌.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from adapters.wire.json_codec import encode_wire_map


@dataclass
class TransportRecord:
    """전송 기록"""

    body: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MockTransactionTransport:
    """Mock 거래 전송

    ITransactionTransport Protocol 구현.
    보낸 본문을 기록하고 같은 내용을 응답으로 반환.

    사용 예시:
    ```python
    transport = MockTransactionTransport()
    response = transport.send_transaction(transaction.to_transaction_map())

    assert len(transport.sent) == 1
    ```
    """

    def __init__(self, decode_floats: bool = True, should_fail: bool = False):
        """
        Args:
            decode_floats: True면 응답 숫자를 float로 디코딩 (일반 JSON 디코더 동작 재현)
            should_fail: True면 모든 전송 실패 (에러 시나리오 테스트용)
        """
        self.decode_floats = decode_floats
        self.should_fail = should_fail
        self.sent: list[TransportRecord] = []

    def send_transaction(self, payload: dict[str, Any]) -> dict[str, Any]:
        """거래 전송 (본문 기록 후 에코)"""
        if self.should_fail:
            raise ConnectionError("mock transport failure")

        body = encode_wire_map(payload)
        self.sent.append(TransportRecord(body=body))

        if self.decode_floats:
            return json.loads(body)
        return json.loads(body, parse_float=str)

    @property
    def last_payload(self) -> dict[str, Any] | None:
        """마지막 전송 본문 (디코딩)"""
        if not self.sent:
            return None
        return json.loads(self.sent[-1].body)

    def reset(self) -> None:
        """기록 초기화"""
        self.sent.clear()
