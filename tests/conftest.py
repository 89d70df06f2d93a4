from __future__ import annotations

import pytest

from tests.fakes import LocalClientStub


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client_stub() -> LocalClientStub:
    return LocalClientStub()
