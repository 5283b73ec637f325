"""Display names for supported interface languages."""

from types import MappingProxyType
from typing import Final, Mapping


LANGUAGES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ca": "Català",
        "de": "Deutsch",
        "en": "English",
        "es": "Español",
        "fr": "Français",
        "hi": "हिन्दी",
        "it": "Italiano",
        "ja": "日本語",
        "ko": "한국어",
        "pl": "Polski",
        "pt-BR": "Português",
        "tr": "Türkçe",
        "vi": "Tiếng Việt",
        "zh-CN": "简体中文",
        "zh-TW": "繁體中文",
    }
)


def language_display_name(code: str) -> str:
    return LANGUAGES.get(code, code)
