"""
pytest 공통 fixture 정의

거래 DSL 모델/와이어 맵 샘플과 임시 설정 파일
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from core.config.loader import Settings
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


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings() -> None:
    """테스트마다 Settings 싱글턴 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def temp_config_file(temp_dir: Path) -> Path:
    """테스트용 sdk.yaml 파일 생성"""
    config_content = """# 테스트용 sdk.yaml
logging:
  level: debug
  file: logs/sdk.log

validation:
  max_metadata_size: 8192
  max_string_length: 512
  max_key_length: 32
  strict_mode: true
"""
    config_path = temp_dir / "sdk.yaml"
    config_path.write_text(config_content, encoding="utf-8")
    return config_path


@pytest.fixture
def simple_send() -> Send:
    """acc-1 → acc-2, USD 100"""
    return Send(
        asset="USD",
        value="100",
        source=Source(from_=[FromTo(account="acc-1")]),
        distribute=Distribute(to=[FromTo(account="acc-2")]),
    )


@pytest.fixture
def simple_transaction(simple_send: Send) -> TransactionDSLInput:
    """최소 거래 입력 (send만)"""
    return TransactionDSLInput(send=simple_send)


@pytest.fixture
def full_transaction() -> TransactionDSLInput:
    """모든 필드를 채운 거래 입력"""
    return TransactionDSLInput(
        chart_of_accounts_group_name="PAYMENTS",
        description="Invoice #123",
        code="TX_123",
        pending=True,
        metadata={"reference": "INV-123", "attempt": 1},
        send=Send(
            asset="USD",
            value="150.75",
            source=Source(
                remaining="acc-remaining-src",
                from_=[
                    FromTo(
                        account="@external/USD",
                        amount=Amount(value="100.25", asset="USD"),
                        description="card settlement",
                        chart_of_accounts="1001",
                        metadata={"channel": "card"},
                    ),
                    FromTo(
                        account="acc-eur",
                        share=Share(percentage=50, percentage_of_percentage=10),
                        rate=Rate(from_="EUR", to="USD", value="1.08", external_id="fx-1"),
                        remaining="acc-eur-remaining",
                    ),
                ],
            ),
            distribute=Distribute(
                remaining="acc-remaining-dst",
                to=[
                    FromTo(account="acc-2", amount=Amount(value="150.75", asset="USD")),
                ],
            ),
        ),
    )


@pytest.fixture
def float_transaction_map() -> dict[str, Any]:
    """일반 JSON 디코더를 거친 와이어 맵 (숫자가 float)"""
    return {
        "description": "decoded",
        "metadata": None,
        "send": {
            "asset": "BTC",
            "value": 0.00000001,
            "source": {
                "from": [
                    {
                        "account": "wallet-1",
                        "amount": {"asset": "BTC", "value": 0.00000001},
                        "share": {"percentage": 50.0, "percentageOfPercentage": 25.0},
                        "rate": {"from": "BTC", "to": "USD", "value": 65000.5, "externalId": "r-1"},
                    }
                ]
            },
            "distribute": {"to": [{"account": "wallet-2"}]},
        },
    }
