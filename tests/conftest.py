from __future__ import annotations

from typing import Iterable

import pytest

from https_client.request_options import PreparedRequest
from https_client.transport import MAX_REDIRECTS, Exchange


class FakeTransport:
    """Replays queued outcomes; an exception outcome is raised instead of returned."""

    def __init__(self, outcomes: Iterable[Exchange | Exception]) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[PreparedRequest] = []

    def exchange(self, request: PreparedRequest, *, max_redirects: int = MAX_REDIRECTS) -> Exchange:
        self.calls.append(request)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def fake_transport():
    def build(*outcomes: Exchange | Exception) -> FakeTransport:
        return FakeTransport(outcomes)

    return build
