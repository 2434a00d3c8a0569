# ua_classifier/classifier.py

import logging
from dataclasses import asdict, dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Optional, Tuple
from ua_classifier.config import settings
from ua_classifier.context import UserAgentProvider, current_user_agent, resolve_user_agent
from ua_classifier.matcher import (
    contains_any_bot_signature,
    find_bot_signature,
    find_first_match,
    find_first_match_with_version,
)
from ua_classifier.signatures import (
    BROWSER_SIGNATURES,
    MOBILE_TOKENS,
    OS_SIGNATURES,
    TABLET_TOKENS,
)

logger = logging.getLogger(__name__)

UNKNOWN_BROWSER = "Unknown Browser"
UNKNOWN_OS = "Unknown OS"


class DeviceType(str, Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
    BOT = "bot"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class UserAgentInfo:
    """Every classification of one user agent string"""
    user_agent: str
    browser: Optional[str]
    browser_version: Optional[str]
    os: Optional[str]
    os_version: Optional[str]
    device_type: str
    is_mobile: bool
    is_tablet: bool
    is_desktop: bool
    is_bot: bool
    bot_signature: Optional[str]
    formatted: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def _contains(user_agent: str, token: str) -> bool:
    return token.lower() in user_agent.lower()


def _contains_any(user_agent: str, tokens: Tuple[str, ...]) -> bool:
    lowered = user_agent.lower()
    return any(token.lower() in lowered for token in tokens)


# -- Browser / OS --------------------------------------------------------


def detect_browser(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> Optional[str]:
    ua = resolve_user_agent(user_agent, provider)
    return find_first_match(BROWSER_SIGNATURES, ua)


def detect_os(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> Optional[str]:
    ua = resolve_user_agent(user_agent, provider)
    return find_first_match(OS_SIGNATURES, ua)


def detect_browser_version(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> Optional[str]:
    """Version captured by the browser signature that matched, if any."""
    ua = resolve_user_agent(user_agent, provider)
    result = find_first_match_with_version(BROWSER_SIGNATURES, ua)
    return result[1] if result else None


def detect_os_version(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> Optional[str]:
    """Version captured by the OS signature that matched, if any."""
    ua = resolve_user_agent(user_agent, provider)
    result = find_first_match_with_version(OS_SIGNATURES, ua)
    return result[1] if result else None


# -- Device type ---------------------------------------------------------


def is_tablet(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> bool:
    ua = resolve_user_agent(user_agent, provider)
    if not ua:
        return False

    if _contains(ua, "iPad"):
        return True

    if _contains(ua, "Android") and not _contains(ua, "Mobile"):
        return True

    return _contains_any(ua, TABLET_TOKENS)


def is_mobile(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> bool:
    """Phones only - a tablet is never mobile."""
    ua = resolve_user_agent(user_agent, provider)
    if not ua:
        return False

    if is_tablet(ua):
        return False

    return _contains_any(ua, MOBILE_TOKENS)


def is_bot(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> bool:
    ua = resolve_user_agent(user_agent, provider)
    return contains_any_bot_signature(ua)


def is_desktop(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> bool:
    ua = resolve_user_agent(user_agent, provider)
    if not ua:
        return False

    return not is_mobile(ua) and not is_tablet(ua) and not is_bot(ua)


def device_type(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> str:
    """
    Classify into one of: bot, tablet, mobile, desktop, unknown.

    Checked in that order; a bot is reported as bot even when it also
    carries mobile or tablet tokens.
    """
    ua = resolve_user_agent(user_agent, provider)
    if not ua:
        return DeviceType.UNKNOWN.value

    if is_bot(ua):
        return DeviceType.BOT.value

    if is_tablet(ua):
        return DeviceType.TABLET.value

    if is_mobile(ua):
        return DeviceType.MOBILE.value

    if is_desktop(ua):
        return DeviceType.DESKTOP.value

    return DeviceType.UNKNOWN.value


# -- Display / comparisons -----------------------------------------------


def formatted(user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> str:
    """Display string "<Browser> on <OS>"."""
    ua = resolve_user_agent(user_agent, provider)

    browser = detect_browser(ua) or UNKNOWN_BROWSER
    os_name = detect_os(ua) or UNKNOWN_OS

    return f"{browser} on {os_name}"


def is_browser(name: str, user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> bool:
    detected = detect_browser(user_agent, provider=provider)
    if not detected:
        return False

    return detected.lower() == name.lower()


def is_os(name: str, user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> bool:
    detected = detect_os(user_agent, provider=provider)
    if not detected:
        return False

    return detected.lower() == name.lower()


def is_device_type(type_name: str, user_agent: Optional[str] = None, *, provider: UserAgentProvider = current_user_agent) -> bool:
    detected = device_type(user_agent, provider=provider)
    return detected.lower() == type_name.lower()


# -- Full classification -------------------------------------------------


def classify_user_agent(user_agent: str) -> UserAgentInfo:
    """
    Run every detection once for a concrete user agent string.

    Does not consult the ambient request; pass the string explicitly.
    """
    ua = user_agent or ""

    browser = find_first_match_with_version(BROWSER_SIGNATURES, ua)
    os_match = find_first_match_with_version(OS_SIGNATURES, ua)

    info = UserAgentInfo(
        user_agent=ua,
        browser=browser[0] if browser else None,
        browser_version=browser[1] if browser else None,
        os=os_match[0] if os_match else None,
        os_version=os_match[1] if os_match else None,
        device_type=device_type(ua),
        is_mobile=is_mobile(ua),
        is_tablet=is_tablet(ua),
        is_desktop=is_desktop(ua),
        is_bot=is_bot(ua),
        bot_signature=find_bot_signature(ua),
        formatted=formatted(ua),
    )

    logger.debug(f"Classified {ua!r} as {info.formatted} ({info.device_type})")
    return info


# Repeated user agents are common; memo is bounded to prevent memory growth
classify_user_agent_cached = lru_cache(maxsize=settings.classification_cache_size)(classify_user_agent)
