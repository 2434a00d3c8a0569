# ua_classifier/matcher.py

from typing import Dict, Optional, Tuple
from ua_classifier.signatures import BOT_PATTERN, BOT_SIGNATURES, SignatureTable

# Canonical spelling for each bot token, keyed by its lowercase form
_BOT_CANONICAL: Dict[str, str] = {token.lower(): token for token in BOT_SIGNATURES}


def find_first_match(table: SignatureTable, user_agent: Optional[str]) -> Optional[str]:
    """
    Scan an ordered signature table and return the first matching label.

    Patterns are searched anywhere in the string (not anchored).
    Returns None for empty input or when nothing matches.
    """
    if not user_agent:
        return None

    for label, pattern in table:
        if pattern.search(user_agent):
            return label

    return None


def find_first_match_with_version(
    table: SignatureTable, user_agent: Optional[str]
) -> Optional[Tuple[str, Optional[str]]]:
    """
    Like find_first_match, but also returns the captured version.

    The version is the first non-empty capture group with underscores
    normalized to dots (iOS and macOS report 17_0 style versions).
    """
    if not user_agent:
        return None

    for label, pattern in table:
        match = pattern.search(user_agent)
        if not match:
            continue
        version = next((group for group in match.groups() if group), None)
        if version:
            version = version.replace("_", ".")
        return label, version

    return None


def contains_any_bot_signature(user_agent: Optional[str]) -> bool:
    if not user_agent:
        return False

    return BOT_PATTERN.search(user_agent) is not None


def find_bot_signature(user_agent: Optional[str]) -> Optional[str]:
    """
    Return the bot token found in the user agent, or None.

    When several tokens occur, the leftmost one in the string wins;
    at the same position the earlier table entry wins.
    """
    if not user_agent:
        return None

    match = BOT_PATTERN.search(user_agent)
    if not match:
        return None

    return _BOT_CANONICAL.get(match.group(0).lower(), match.group(0))
