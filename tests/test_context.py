"""Tests for the ambient request user agent and its sanitization."""

from ua_classifier.classifier import detect_browser, detect_os, device_type, formatted, is_browser
from ua_classifier.context import current_user_agent, resolve_user_agent, sanitize_user_agent, user_agent_scope
from tests.user_agents import FIREFOX_LINUX, SAFARI_IPHONE


def test_sanitize_strips_tags():
    assert sanitize_user_agent("Mozilla/5.0 <b>Firefox/121.0</b>") == "Mozilla/5.0 Firefox/121.0"


def test_sanitize_drops_script_content():
    assert sanitize_user_agent("Mozilla<script>alert(1)</script>/5.0") == "Mozilla/5.0"


def test_sanitize_unslashes():
    assert sanitize_user_agent("Mozilla\\/5.0 (it\\'s)") == "Mozilla/5.0 (it's)"
    assert sanitize_user_agent("C:\\\\path") == "C:\\path"


def test_sanitize_unescapes_entities():
    assert sanitize_user_agent("Agent &amp; Co") == "Agent & Co"


def test_sanitize_empty():
    assert sanitize_user_agent(None) == ""
    assert sanitize_user_agent("") == ""
    assert sanitize_user_agent("   ") == ""


def test_no_request_means_empty_user_agent():
    assert current_user_agent() == ""
    assert detect_browser() is None
    assert device_type() == "unknown"
    assert formatted() == "Unknown Browser on Unknown OS"


def test_scope_provides_ambient_user_agent():
    with user_agent_scope(SAFARI_IPHONE):
        assert current_user_agent() == SAFARI_IPHONE
        assert detect_browser() == "Safari Mobile"
        assert device_type() == "mobile"
        assert is_browser("safari mobile") is True

    assert current_user_agent() == ""


def test_ambient_value_is_sanitized():
    with user_agent_scope("<i>" + FIREFOX_LINUX + "</i>"):
        assert current_user_agent() == FIREFOX_LINUX


def test_explicit_empty_string_does_not_fall_back():
    with user_agent_scope(SAFARI_IPHONE):
        assert detect_browser("") is None
        assert device_type("") == "unknown"


def test_injected_provider():
    assert detect_os(provider=lambda: FIREFOX_LINUX) == "Linux"
    assert resolve_user_agent(None, lambda: FIREFOX_LINUX) == FIREFOX_LINUX
    assert resolve_user_agent("explicit", lambda: FIREFOX_LINUX) == "explicit"


def test_sanitize_never_returns_entity_encoded_tags():
    assert sanitize_user_agent("&lt;b&gt;x&lt;/b&gt;") == "x"
    assert sanitize_user_agent("Mozilla &lt;b&gt;x&lt;/b&gt;   Firefox/1.0") == "Mozilla x Firefox/1.0"
    assert "<" not in sanitize_user_agent("Agent &amp;lt;script&amp;gt;1&amp;lt;/script&amp;gt;")
