"""
English/Arabic language preference kept in the session
"""
from flask import session, current_app

LANGUAGES = ("en", "ar")


def get_language() -> str:
    language = session.get("language") or current_app.config.get("DEFAULT_LANGUAGE", "en")
    return language if language in LANGUAGES else "en"


def set_language(language: str) -> str:
    if language in LANGUAGES:
        session["language"] = language
    return get_language()


def toggle_language() -> str:
    return set_language("ar" if get_language() == "en" else "en")


def t(en: str, ar: str) -> str:
    """Pick the string for the current language."""
    return ar if get_language() == "ar" else en


def inject_language():
    # Template context: t(), language and text direction
    language = get_language()
    return {"t": t, "language": language, "is_rtl": language == "ar"}
