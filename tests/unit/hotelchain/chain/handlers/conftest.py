import uuid
from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"
    tenant_id: str | None = None


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def hotel_name():
    """ハンドラ間で共有されるリポジトリを汚さないよう毎回別名を使う"""
    return f"Hotel {uuid.uuid4().hex[:8]}"


@pytest.fixture
def payer_payload():
    return {
        "identity": {"type": "Passport", "id_number": uuid.uuid4().hex},
        "card_number": "4444555566667777",
        "expiry_date": "12/28",
        "cvv": "123",
    }
