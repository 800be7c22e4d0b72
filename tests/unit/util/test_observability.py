"""Unit tests for Logfire export selection."""

import pytest

from atelier.config import ObservabilitySettings
from atelier.util.observability import should_send


@pytest.mark.parametrize(
    ("token", "explicit", "expected"),
    [
        (None, None, False),
        ("lf_token", None, True),
        ("lf_token", False, False),
        (None, True, True),
    ],
)
def test_should_send(token, explicit, expected):
    settings = ObservabilitySettings(logfire_token=token, send_to_logfire=explicit)

    assert should_send(settings) is expected
