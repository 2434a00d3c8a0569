# ua_classifier/__init__.py

from ua_classifier.catalog import list_browsers, list_device_types, list_operating_systems
from ua_classifier.classifier import (
    DeviceType,
    UserAgentInfo,
    classify_user_agent,
    classify_user_agent_cached,
    detect_browser,
    detect_browser_version,
    detect_os,
    detect_os_version,
    device_type,
    formatted,
    is_bot,
    is_browser,
    is_desktop,
    is_device_type,
    is_mobile,
    is_os,
    is_tablet,
)
from ua_classifier.context import current_user_agent, sanitize_user_agent, user_agent_scope

__version__ = "1.0.0"

__all__ = [
    "DeviceType",
    "UserAgentInfo",
    "classify_user_agent",
    "classify_user_agent_cached",
    "current_user_agent",
    "detect_browser",
    "detect_browser_version",
    "detect_os",
    "detect_os_version",
    "device_type",
    "formatted",
    "is_bot",
    "is_browser",
    "is_desktop",
    "is_device_type",
    "is_mobile",
    "is_os",
    "is_tablet",
    "list_browsers",
    "list_device_types",
    "list_operating_systems",
    "sanitize_user_agent",
    "user_agent_scope",
]
