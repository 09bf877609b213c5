"""
거래 DSL 패키지

Send → Source/Distribute → From/To 구조의 거래 입력 모델, 검증, 와이어 맵 변환.

사용 예시:
```python
from core.transaction import TransactionBuilder, from_transaction_map

# 생성 + 검증
transaction = (
    TransactionBuilder.transfer("USD", "100", "acc-1", "acc-2")
    .with_description("Invoice #123")
    .build(validate=True)
)

# 전송용 맵
payload = transaction.to_transaction_map()

# 수신 맵 복원 (검증은 별도)
restored = from_transaction_map(payload)
restored.validate()
```
"""

from core.transaction.builder import (
    BuilderConsumedError,
    FromToBuilder,
    SendBuilder,
    TransactionBuilder,
)
from core.transaction.marshal import to_transaction_map
from core.transaction.numeric import (
    ExactLiteral,
    FloatLiteral,
    NumericLiteral,
    StringLiteral,
    parse_numeric,
    to_decimal_string,
)
from core.transaction.types import (
    Amount,
    Distribute,
    FromTo,
    Rate,
    Send,
    Share,
    Source,
    TransactionDSLInput,
)
from core.transaction.unmarshal import from_transaction_map
from core.transaction.validation import validate_send, validate_transaction

__all__ = [
    # 모델
    "Amount",
    "Share",
    "Rate",
    "FromTo",
    "Source",
    "Distribute",
    "Send",
    "TransactionDSLInput",
    # 빌더
    "FromToBuilder",
    "SendBuilder",
    "TransactionBuilder",
    "BuilderConsumedError",
    # 검증
    "validate_send",
    "validate_transaction",
    # 변환
    "to_transaction_map",
    "from_transaction_map",
    # 숫자 리터럴
    "NumericLiteral",
    "StringLiteral",
    "FloatLiteral",
    "ExactLiteral",
    "parse_numeric",
    "to_decimal_string",
]
