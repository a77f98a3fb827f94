"""
Localized message catalog used for error and sentence responses.
English is the fallback for unknown languages and missing keys.
"""
from typing import Dict, Optional

FALLBACK_LANGUAGE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "invalidDecimalError": "Invalid decimal number",
        "invalidIntError": "Invalid integer",
        "totalWords": "There are {count} words in the dictionary.",
    },
    "de": {
        "invalidDecimalError": "Ungültige Dezimalzahl",
        "invalidIntError": "Ungültige Ganzzahl",
        "totalWords": "Es gibt {count} Wörter im Wörterbuch.",
    },
    "es": {
        "invalidDecimalError": "Número decimal no válido",
        "invalidIntError": "Número entero no válido",
        "totalWords": "Hay {count} palabras en el diccionario.",
    },
    "fr": {
        "invalidDecimalError": "Nombre décimal invalide",
        "invalidIntError": "Nombre entier invalide",
        "totalWords": "Il y a {count} mots dans le dictionnaire.",
    },
    "nl": {
        "invalidDecimalError": "Ongeldig decimaal getal",
        "invalidIntError": "Ongeldig geheel getal",
        "totalWords": "Er staan {count} woorden in het woordenboek.",
    },
    "pl": {
        "invalidDecimalError": "Nieprawidłowa liczba dziesiętna",
        "invalidIntError": "Nieprawidłowa liczba całkowita",
        "totalWords": "Liczba słów w słowniku: {count}.",
    },
    "ru": {
        "invalidDecimalError": "Недопустимое десятичное число",
        "invalidIntError": "Недопустимое целое число",
        "totalWords": "Количество слов в словаре: {count}.",
    },
    "sv": {
        "invalidDecimalError": "Ogiltigt decimaltal",
        "invalidIntError": "Ogiltigt heltal",
        "totalWords": "Det finns {count} ord i ordboken.",
    },
}


def text(key: str, language_code: Optional[str] = None, **values) -> str:
    """
    Look up a message in the requested language.

    Args:
        key: Message key, e.g. "invalidIntError"
        language_code: Two-letter language code, None means English
        **values: Placeholders to format into the message

    Returns:
        str: The formatted message
    """
    lang = (language_code or FALLBACK_LANGUAGE).strip().lower()
    catalog = MESSAGES.get(lang, MESSAGES[FALLBACK_LANGUAGE])
    message = catalog.get(key, MESSAGES[FALLBACK_LANGUAGE][key])
    return message.format(**values) if values else message
