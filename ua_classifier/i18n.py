# ua_classifier/i18n.py

import gettext
import re
from functools import lru_cache
from typing import Callable, Optional
from ua_classifier.config import settings

Translator = Callable[[str], str]

# Plain locale names only (en, sv_SE, pt-BR); the value becomes part of a .mo path
LOCALE_PATTERN = r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]+)?$"
_LOCALE_RE = re.compile(LOCALE_PATTERN)


@lru_cache(maxsize=32)
def get_translator(locale: Optional[str] = None) -> Translator:
    """
    Label resolver for a locale.

    Falls back to the untranslated (English) label when no compiled
    catalog exists for the locale. Raises ValueError for anything that
    is not a locale name.
    """
    locale = locale or settings.locale
    if not _LOCALE_RE.match(locale):
        raise ValueError(f"Invalid locale: {locale!r}")

    translation = gettext.translation(
        settings.text_domain,
        localedir=settings.locale_dir,
        languages=[locale],
        fallback=True,
    )
    return translation.gettext
