"""Translation loading for the ``server-info`` text domain.

Catalogs live under ``server_info/locale/<lang>/LC_MESSAGES/server-info.mo``.
Without a catalog every string falls back to its source text.
"""

import gettext as _gettext
from collections.abc import Sequence
from pathlib import Path

DOMAIN = "server-info"
LOCALE_DIR = Path(__file__).parent / "locale"

_translation: _gettext.NullTranslations = _gettext.translation(
    DOMAIN, localedir=LOCALE_DIR, fallback=True
)


def install(languages: Sequence[str] | None = None) -> None:
    """Switch the active catalog to the first available language."""
    global _translation
    _translation = _gettext.translation(
        DOMAIN, localedir=LOCALE_DIR, languages=languages, fallback=True
    )


def gettext(message: str) -> str:
    return _translation.gettext(message)


def ngettext(singular: str, plural: str, n: int) -> str:
    return _translation.ngettext(singular, plural, n)


_ = gettext
