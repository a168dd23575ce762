"""
Property-based tests for the UTF-16 body length rule.

A body is sendable iff its UTF-16 code-unit count is at most 1600; rejected
bodies never reach the transport.
"""
from __future__ import annotations

from urllib.parse import unquote

from hypothesis import HealthCheck, example, given, settings, strategies as st

from sms_client import FailureKind, MessagingClient
from tests.fixtures.transport import StubTransport

BMP_CHARS = ["a", "Z", "7", " ", "é", "ß", "€", "中", "\n"]
ASTRAL_CHARS = ["😀", "𝄞", "🚀", "𠜎"]


@st.composite
def mixed_bodies(draw):
    """Bodies of one-unit and two-unit characters with a known unit count"""
    n_bmp = draw(st.integers(min_value=0, max_value=1700))
    n_astral = draw(st.integers(min_value=0, max_value=900))
    chars = [draw(st.sampled_from(BMP_CHARS))] * n_bmp
    chars += [draw(st.sampled_from(ASTRAL_CHARS))] * n_astral
    draw(st.randoms(use_true_random=False)).shuffle(chars)
    return "".join(chars), n_bmp + 2 * n_astral


@settings(max_examples=60, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(mixed_bodies())
@example(("a" * 1600, 1600))
@example(("a" * 1601, 1601))
@example(("😀" * 801, 1602))
def test_length_rule_is_over_utf16_units(case) -> None:
    body, units = case
    transport = StubTransport()
    result = MessagingClient("ACtest", "test-token", transport=transport).send_message("+1", "+2", body)

    if units <= 1600:
        assert result.ok is True
        assert len(transport.calls) == 1
    else:
        assert result.ok is False
        assert result.error == FailureKind.VALIDATION
        assert "1600" in result.detail
        assert f"Cannot send message with {units} characters." in result.detail
        assert transport.calls == []


@settings(max_examples=100, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=400))
def test_short_bodies_are_sent_intact(body: str) -> None:
    transport = StubTransport()
    result = MessagingClient("ACtest", "test-token", transport=transport).send_message("+1", "+2", body)

    assert result.ok is True
    assert unquote(transport.last.params["Body"]) == body
