from typing import NamedTuple


class Language(NamedTuple):
    code: str
    name: str


LANGUAGES = (
    Language("ko", "한국어"),
    Language("en", "English"),
    Language("zh", "中文 (Chinese)"),
    Language("ja", "日本語 (Japanese)"),
    Language("es", "Español (Spanish)"),
)

DEFAULT_LANGUAGE = "ko"
FALLBACK_NAME = "Korean"

_BY_CODE = {lang.code: lang for lang in LANGUAGES}


def language_codes():
    return [lang.code for lang in LANGUAGES]


def language_name(code):
    """Display name used in the translation directive."""
    lang = _BY_CODE.get(code)
    return lang.name if lang else FALLBACK_NAME
