# ua_classifier/catalog.py
"""
Enumerations of every value the classifier can report, for building
select lists and validating stored filters.
"""

from typing import Dict, Iterable, List, Optional, Union
from ua_classifier.classifier import DeviceType
from ua_classifier.i18n import Translator, get_translator
from ua_classifier.signatures import BROWSER_SIGNATURES, OS_SIGNATURES, table_labels

Catalog = Dict[str, str]
Options = List[Dict[str, str]]

# Display order and untranslated labels. Keys are reconciled with the
# signature tables in _catalog_keys, so these never drift from the matcher.
BROWSER_LABELS: Catalog = {
    "Chrome": "Chrome",
    "Chrome Mobile": "Chrome Mobile",
    "Chrome iOS": "Chrome iOS",
    "Chrome OS": "Chrome OS",
    "Firefox": "Firefox",
    "Firefox iOS": "Firefox iOS",
    "Safari": "Safari",
    "Safari Mobile": "Safari Mobile",
    "Edge": "Edge",
    "Opera": "Opera",
    "Brave": "Brave",
    "Vivaldi": "Vivaldi",
    "Samsung Browser": "Samsung Browser",
    "UC Browser": "UC Browser",
    "DuckDuckGo iOS": "DuckDuckGo iOS",
    "Internet Explorer": "Internet Explorer",
    "Android WebView": "Android WebView",
    "iOS WebView": "iOS WebView",
    "Electron": "Electron",
}

OS_LABELS: Catalog = {
    "Windows": "Windows (any version)",
    "Windows 10": "Windows 10",
    "Windows 11": "Windows 11",
    "macOS": "macOS",
    "iOS": "iOS",
    "Android": "Android",
    "Linux": "Linux",
    "Ubuntu": "Ubuntu",
    "Chrome OS": "Chrome OS",
}

DEVICE_TYPE_LABELS: Catalog = {
    DeviceType.DESKTOP.value: "Desktop",
    DeviceType.MOBILE.value: "Mobile",
    DeviceType.TABLET.value: "Tablet",
    DeviceType.BOT.value: "Bot/Crawler",
    DeviceType.UNKNOWN.value: "Unknown",
}


def _catalog_keys(preferred: Iterable[str], available: Iterable[str]) -> List[str]:
    """Curated order first, then anything the matcher reports that is not curated."""
    available = list(available)
    keys = [key for key in preferred if key in available]
    keys.extend(key for key in available if key not in keys)
    return keys


def _build(keys: Iterable[str], labels: Catalog, translate: Translator) -> Catalog:
    return {key: translate(labels.get(key, key)) for key in keys}


def to_options(items: Catalog) -> Options:
    """Convert {key: label} into [{"value": key, "label": label}, ...]."""
    return [{"value": value, "label": label} for value, label in items.items()]


def _result(items: Catalog, as_options: bool) -> Union[Catalog, Options]:
    if not as_options:
        return items
    return to_options(items)


def list_browsers(as_options: bool = False, translate: Optional[Translator] = None) -> Union[Catalog, Options]:
    keys = _catalog_keys(BROWSER_LABELS, table_labels(BROWSER_SIGNATURES))
    return _result(_build(keys, BROWSER_LABELS, translate or get_translator()), as_options)


def list_operating_systems(as_options: bool = False, translate: Optional[Translator] = None) -> Union[Catalog, Options]:
    keys = _catalog_keys(OS_LABELS, table_labels(OS_SIGNATURES))
    return _result(_build(keys, OS_LABELS, translate or get_translator()), as_options)


def list_device_types(as_options: bool = False, translate: Optional[Translator] = None) -> Union[Catalog, Options]:
    keys = _catalog_keys(DEVICE_TYPE_LABELS, (member.value for member in DeviceType))
    return _result(_build(keys, DEVICE_TYPE_LABELS, translate or get_translator()), as_options)
