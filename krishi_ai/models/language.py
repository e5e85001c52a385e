from enum import Enum


class Language(str, Enum):
    HINDI = "hi"
    ENGLISH = "en"
    MARATHI = "mr"
    GUJARATI = "gu"
    PUNJABI = "pa"
    TAMIL = "ta"
    TELUGU = "te"
    KANNADA = "kn"
    MALAYALAM = "ml"
    BENGALI = "bn"
    ODIA = "or"


LANGUAGE_NAMES = {
    Language.HINDI: "Hindi",
    Language.ENGLISH: "English",
    Language.MARATHI: "Marathi",
    Language.GUJARATI: "Gujarati",
    Language.PUNJABI: "Punjabi",
    Language.TAMIL: "Tamil",
    Language.TELUGU: "Telugu",
    Language.KANNADA: "Kannada",
    Language.MALAYALAM: "Malayalam",
    Language.BENGALI: "Bengali",
    Language.ODIA: "Odia",
}

# Fallback text exists only for these; every other language reads English.
BASELINE_LANGUAGE = Language.ENGLISH
TEMPLATE_LANGUAGES = frozenset(
    {Language.HINDI, Language.MARATHI, Language.GUJARATI, Language.ENGLISH}
)


def coerce_language(value) -> Language:
    if isinstance(value, Language):
        return value
    try:
        return Language(str(value).strip().lower())
    except ValueError:
        return BASELINE_LANGUAGE


def get_language_name(language) -> str:
    return LANGUAGE_NAMES.get(coerce_language(language), "English")
