# ua_classifier/signatures.py

import re
from typing import Tuple

SignatureTable = Tuple[Tuple[str, re.Pattern], ...]


def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


# Patterns matched in order - first match wins.
# Most specific patterns first: later generic ones would shadow them.
BROWSER_SIGNATURES: SignatureTable = (
    # Electron-based applications
    ("Electron", _compile(r"Electron/([0-9.]+)")),

    # Mobile WebViews (before mobile browsers)
    ("Android WebView", _compile(r"Android.*wv.*Chrome/([0-9.]+)")),
    ("iOS WebView", _compile(r"Mobile.*Safari.*AppleWebKit(?!.*Version)")),

    # Specific mobile browsers
    ("Chrome iOS", _compile(r"CriOS/([0-9.]+)")),
    ("Firefox iOS", _compile(r"FxiOS/([0-9.]+)")),
    ("DuckDuckGo iOS", _compile(r"DuckDuckGo/([0-9.]+)")),
    ("Safari Mobile", _compile(r"(?:iPhone|iPad|iPod).+Version/([0-9.]+).+Safari")),
    ("Samsung Browser", _compile(r"SamsungBrowser/([0-9.]+)")),
    ("UC Browser", _compile(r"UCBrowser/([0-9.]+)")),

    # Desktop browsers with their own token (all of them also send Chrome/)
    ("Edge", _compile(r"Edg(?:e|A|iOS)?/([0-9.]+)")),
    ("Opera", _compile(r"OPR/([0-9.]+)|Opera/([0-9.]+)")),
    ("Brave", _compile(r"Brave/([0-9.]+)")),
    ("Vivaldi", _compile(r"Vivaldi/([0-9.]+)")),
    ("Chrome OS", _compile(r"CrOS.+Chrome/([0-9.]+)")),

    # Generic patterns
    ("Chrome Mobile", _compile(r"Chrome/([0-9.]+).*Mobile(?!.*(?:Edge|OPR|Opera|Brave|Vivaldi))")),
    ("Chrome", _compile(r"Chrome/([0-9.]+)(?!.*(?:Edge|OPR|Opera|Brave|Vivaldi|Mobile|wv))")),
    ("Firefox", _compile(r"Firefox/([0-9.]+)")),
    ("Safari", _compile(r"Version/([0-9.]+).+Safari(?!.*Chrome)")),

    # Legacy
    ("Internet Explorer", _compile(r"MSIE ([0-9.]+)|Trident.*rv:([0-9.]+)")),
)

OS_SIGNATURES: SignatureTable = (
    ("iOS", _compile(r"iPhone OS ([0-9._]+)|iPad.*OS ([0-9._]+)|iPod.*OS ([0-9._]+)|CPU.*OS ([0-9._]+)")),
    ("Android", _compile(r"Android ([0-9.]+)")),
    ("Windows 11", _compile(r"Windows NT 10\.0.*(?:Build 22000|Build 22H2)")),
    ("Windows 10", _compile(r"Windows NT 10\.0")),
    ("Windows", _compile(r"Windows NT ([0-9.]+)")),
    ("macOS", _compile(r"Mac OS X ([0-9._]+)|Intel Mac OS X ([0-9._]+)")),
    ("Linux", _compile(r"Linux(?!.*Android)")),
    ("Chrome OS", _compile(r"CrOS")),
    ("Ubuntu", _compile(r"Ubuntu")),
)

BOT_SIGNATURES: Tuple[str, ...] = (
    # Search engines
    "Googlebot",
    "Google-InspectionTool",
    "Google-Extended",
    "GoogleOther",
    "bingbot",
    "BingPreview",
    "Baiduspider",
    "DuckDuckBot",
    "YandexBot",

    # AI / LLM crawlers
    "GPTBot",
    "ChatGPT-User",
    "OAI-SearchBot",
    "ClaudeBot",
    "Claude-Web",
    "PerplexityBot",
    "Meta-ExternalAgent",
    "CCBot",
    "ImagesiftBot",
    "Bytespider",
    "Anthropic-AI",

    # Social media link previews
    "facebookexternalhit",
    "Twitterbot",
    "LinkedInBot",
    "WhatsApp",
    "TelegramBot",
    "Slackbot",
    "Discordbot",

    # Other major crawlers
    "Applebot",
    "SemrushBot",
    "AhrefsBot",
    "MJ12bot",
    "DotBot",

    # Generic
    "spider",
    "crawler",
    "bot",
    "scraper",

    # Programmatic / CLI clients
    "curl",
    "wget",
    "python-requests",
    "python-urllib",
    "python",
    "Go-http-client",
    "Java",
    "Ruby",
    "Perl",
    "PHP",
    "node-fetch",
    "axios",
    "libwww-perl",
    "HTTPClient",
    "PostmanRuntime",
    "insomnia",
)

# Single alternation: only presence matters, not which entry matched
BOT_PATTERN: re.Pattern = _compile("|".join(re.escape(token) for token in BOT_SIGNATURES))

# Android tablets omit the "Mobile" token that Android phones send
TABLET_TOKENS: Tuple[str, ...] = ("Tablet", "PlayBook", "Kindle", "Silk", "Surface")

MOBILE_TOKENS: Tuple[str, ...] = (
    "Mobile",
    "iPhone",
    "iPod",
    "Android",
    "BlackBerry",
    "Windows Phone",
    "webOS",
    "Opera Mini",
    "Opera Mobi",
    "IEMobile",
)


def table_labels(table: SignatureTable) -> Tuple[str, ...]:
    """Labels of a signature table in priority order."""
    return tuple(label for label, _ in table)
