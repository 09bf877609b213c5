"""
거래 제출 클라이언트

검증 → 와이어 맵 변환 → 전송 → 응답 복원 흐름을 묶음.
전송 자체(HTTP, 인증)는 ITransactionTransport 구현체가 담당.
"""

import logging

from adapters.interfaces import ITransactionTransport
from core.config.loader import get_settings
from core.transaction.types import TransactionDSLInput
from core.transaction.unmarshal import from_transaction_map
from core.types import ValidationConfig

logger = logging.getLogger(__name__)


class TransactionClient:
    """DSL 거래 제출 클라이언트

    사용 예시:
    ```python
    client = TransactionClient(transport)
    created = client.submit(transaction)
    ```
    """

    def __init__(
        self,
        transport: ITransactionTransport,
        config: ValidationConfig | None = None,
    ):
        """
        Args:
            transport: 전송 구현체
            config: 검증 설정 (None이면 sdk.yaml의 validation 섹션)
        """
        self.transport = transport
        self.config = config

    def submit(self, transaction: TransactionDSLInput) -> TransactionDSLInput | None:
        """거래 검증 후 전송

        Raises:
            TransactionValidationError: 검증 실패 (전송하지 않음)

        Returns:
            백엔드 응답에서 복원한 입력 (응답이 객체가 아니면 None)
        """
        config = self.config if self.config is not None else get_settings().validation
        transaction.validate(config)

        payload = transaction.to_transaction_map()
        logger.info(
            f"거래 전송: asset={transaction.get_asset()} value={transaction.get_value()} "
            f"sources={len(transaction.get_source_accounts())} "
            f"destinations={len(transaction.get_destination_accounts())}"
        )

        response = self.transport.send_transaction(payload)
        return from_transaction_map(response)
