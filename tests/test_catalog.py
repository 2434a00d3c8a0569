"""Tests for the catalog of detectable values."""

import pytest

from ua_classifier.catalog import (
    _catalog_keys,
    list_browsers,
    list_device_types,
    list_operating_systems,
    to_options,
)
from ua_classifier.i18n import get_translator
from ua_classifier.signatures import BROWSER_SIGNATURES, OS_SIGNATURES, table_labels


def test_browser_catalog_matches_signature_table(english):
    browsers = list_browsers(translate=english)

    assert set(browsers) == set(table_labels(BROWSER_SIGNATURES))
    assert list(browsers)[:4] == ["Chrome", "Chrome Mobile", "Chrome iOS", "Chrome OS"]
    assert browsers["Internet Explorer"] == "Internet Explorer"


def test_os_catalog_matches_signature_table(english):
    operating_systems = list_operating_systems(translate=english)

    assert set(operating_systems) == set(table_labels(OS_SIGNATURES))
    assert list(operating_systems)[0] == "Windows"
    assert operating_systems["Windows"] == "Windows (any version)"


def test_device_types(english):
    assert list_device_types(translate=english) == {
        "desktop": "Desktop",
        "mobile": "Mobile",
        "tablet": "Tablet",
        "bot": "Bot/Crawler",
        "unknown": "Unknown",
    }


@pytest.mark.parametrize("builder", [list_browsers, list_operating_systems, list_device_types])
def test_options_shape(builder, english):
    mapping = builder(translate=english)
    options = builder(as_options=True, translate=english)

    assert len(options) == len(mapping)
    for option in options:
        assert set(option) == {"value", "label"}
        assert mapping[option["value"]] == option["label"]


def test_labels_are_translated():
    device_types = list_device_types(translate=str.upper)
    assert device_types["bot"] == "BOT/CRAWLER"


def test_default_translator_falls_back_to_english():
    assert list_device_types()["bot"] == "Bot/Crawler"


def test_catalog_keys_follow_available_labels():
    keys = _catalog_keys(["b", "stale", "a"], ["a", "b", "new"])
    assert keys == ["b", "a", "new"]


def test_to_options_keeps_order():
    assert to_options({"z": "Zed", "a": "Ay"}) == [
        {"value": "z", "label": "Zed"},
        {"value": "a", "label": "Ay"},
    ]


def test_translator_rejects_invalid_locale():
    with pytest.raises(ValueError):
        get_translator("../x")


def test_translator_accepts_locale_names():
    assert get_translator("pt-BR")("Desktop") == "Desktop"
