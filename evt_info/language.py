"""Language identifier lookups for Windows Event Log metadata.

Event log message resources are keyed by a numeric language identifier
(the primary language part of a Windows LCID). This module maps those
identifiers to short language tags and back.

The table covers the primary language identifiers 0x0001 to 0x0091. Every
entry resolves from identifier to tag; only the two-letter tags listed in
STRING_LOOKUP_TAGS resolve from tag to identifier.

Basic Usage:
    >>> language_identifier_from_string("en-US")
    9
    >>> language_identifier_to_string(0x000C)
    'fr'
    >>> language_identifier_from_string("xx") == LANGUAGE_IDENTIFIER_UNDEFINED
    True
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .exceptions import InvalidArgumentError


LANGUAGE_IDENTIFIER_UNDEFINED = 0x0000
LANGUAGE_IDENTIFIER_MAXIMUM = 0xFFFFFFFF


@dataclass(frozen=True)
class LocaleEntry:
    """A language identifier and its canonical tag."""

    identifier: int
    tag: str
    name: str


LANGUAGE_TABLE: Tuple[LocaleEntry, ...] = (
    LocaleEntry(0x0001, "ar", "Arabic"),
    LocaleEntry(0x0002, "bg", "Bulgarian"),
    LocaleEntry(0x0003, "ca", "Catalan"),
    LocaleEntry(0x0004, "zh-Hans", "Chinese, Han (Simplified variant)"),
    LocaleEntry(0x0005, "cs", "Czech"),
    LocaleEntry(0x0006, "da", "Danish"),
    LocaleEntry(0x0007, "de", "German"),
    LocaleEntry(0x0008, "el", "Greek"),
    LocaleEntry(0x0009, "en", "English"),
    LocaleEntry(0x000A, "es", "Spanish"),
    LocaleEntry(0x000B, "fi", "Finnish"),
    LocaleEntry(0x000C, "fr", "French"),
    LocaleEntry(0x000D, "he", "Hebrew"),
    LocaleEntry(0x000E, "hu", "Hungarian"),
    LocaleEntry(0x000F, "is", "Icelandic"),
    LocaleEntry(0x0010, "it", "Italian"),
    LocaleEntry(0x0011, "ja", "Japanese"),
    LocaleEntry(0x0012, "ko", "Korean"),
    LocaleEntry(0x0013, "nl", "Dutch"),
    LocaleEntry(0x0014, "no", "Norwegian"),
    LocaleEntry(0x0015, "pl", "Polish"),
    LocaleEntry(0x0016, "pt", "Portuguese"),
    LocaleEntry(0x0017, "rm", "Romansh"),
    LocaleEntry(0x0018, "ro", "Romanian"),
    LocaleEntry(0x0019, "ru", "Russian"),
    LocaleEntry(0x001A, "hr", "Croatian"),
    LocaleEntry(0x001B, "sk", "Slovak"),
    LocaleEntry(0x001C, "sq", "Albanian"),
    LocaleEntry(0x001D, "sv", "Swedish"),
    LocaleEntry(0x001E, "th", "Thai"),
    LocaleEntry(0x001F, "tr", "Turkish"),
    LocaleEntry(0x0020, "ur", "Urdu"),
    LocaleEntry(0x0021, "id", "Indonesian"),
    LocaleEntry(0x0022, "uk", "Ukrainian"),
    LocaleEntry(0x0023, "be", "Belarusian"),
    LocaleEntry(0x0024, "sl", "Slovenian"),
    LocaleEntry(0x0025, "et", "Estonian"),
    LocaleEntry(0x0026, "lv", "Latvian"),
    LocaleEntry(0x0027, "lt", "Lithuanian"),
    LocaleEntry(0x0028, "tg", "Tajik"),
    LocaleEntry(0x0029, "fa", "Persian"),
    LocaleEntry(0x002A, "vi", "Vietnamese"),
    LocaleEntry(0x002B, "hy", "Armenian"),
    LocaleEntry(0x002C, "az", "Azerbaijani"),
    LocaleEntry(0x002D, "eu", "Basque"),
    LocaleEntry(0x002E, "hsb", "Upper Sorbian"),
    LocaleEntry(0x002F, "mk", "Macedonian"),
    LocaleEntry(0x0032, "tn", "Tswana"),
    LocaleEntry(0x0034, "xh", "Xhosa"),
    LocaleEntry(0x0035, "zu", "Zulu"),
    LocaleEntry(0x0036, "af", "Afrikaans"),
    LocaleEntry(0x0037, "ka", "Georgian"),
    LocaleEntry(0x0038, "fo", "Faroese"),
    LocaleEntry(0x0039, "hi", "Hindi"),
    LocaleEntry(0x003A, "mt", "Maltese"),
    LocaleEntry(0x003B, "se", "Northern Sami"),
    LocaleEntry(0x003C, "ga", "Irish"),
    LocaleEntry(0x003E, "ms", "Malay (macrolanguage)"),
    LocaleEntry(0x003F, "kk", "Kazakh"),
    LocaleEntry(0x0040, "ky", "Kirghiz"),
    LocaleEntry(0x0041, "sw", "Swahili (macrolanguage)"),
    LocaleEntry(0x0042, "tk", "Turkmen"),
    LocaleEntry(0x0043, "uz", "Uzbek"),
    LocaleEntry(0x0044, "tt", "Tatar"),
    LocaleEntry(0x0045, "bn", "Bengali"),
    LocaleEntry(0x0046, "pa", "Panjabi"),
    LocaleEntry(0x0047, "gu", "Gujarati"),
    LocaleEntry(0x0048, "or", "Oriya"),
    LocaleEntry(0x0049, "ta", "Tamil"),
    LocaleEntry(0x004A, "te", "Telugu"),
    LocaleEntry(0x004B, "kn", "Kannada"),
    LocaleEntry(0x004C, "ml", "Malayalam"),
    LocaleEntry(0x004D, "as", "Assamese"),
    LocaleEntry(0x004E, "mr", "Marathi"),
    LocaleEntry(0x004F, "sa", "Sanskrit"),
    LocaleEntry(0x0050, "mn", "Mongolian"),
    LocaleEntry(0x0051, "bo", "Tibetan"),
    LocaleEntry(0x0052, "cy", "Welsh"),
    LocaleEntry(0x0053, "km", "Central Khmer"),
    LocaleEntry(0x0054, "lo", "Lao"),
    LocaleEntry(0x0056, "gl", "Galician"),
    LocaleEntry(0x0057, "kok", "Konkani (macrolanguage)"),
    LocaleEntry(0x005A, "syr", "Syriac"),
    LocaleEntry(0x005B, "si", "Sinhala"),
    LocaleEntry(0x005D, "iu", "Inuktitut"),
    LocaleEntry(0x005E, "am", "Amharic"),
    LocaleEntry(0x005F, "tzm", "Central Atlas Tamazight"),
    LocaleEntry(0x0061, "ne", "Nepali"),
    LocaleEntry(0x0062, "fy", "Western Frisian"),
    LocaleEntry(0x0063, "ps", "Pushto"),
    LocaleEntry(0x0064, "fil", "Filipino"),
    LocaleEntry(0x0065, "dv", "Dhivehi"),
    LocaleEntry(0x0068, "ha", "Hausa"),
    LocaleEntry(0x006A, "yo", "Yoruba"),
    LocaleEntry(0x006B, "quz", "Cusco Quechua"),
    LocaleEntry(0x006C, "nso", "Pedi"),
    LocaleEntry(0x006D, "ba", "Bashkir"),
    LocaleEntry(0x006E, "lb", "Luxembourgish"),
    LocaleEntry(0x006F, "kl", "Kalaallisut"),
    LocaleEntry(0x0070, "ig", "Igbo"),
    LocaleEntry(0x0078, "ii", "Sichuan Yi"),
    LocaleEntry(0x007A, "arn", "Mapudungun"),
    LocaleEntry(0x007C, "moh", "Mohawk"),
    LocaleEntry(0x007E, "br", "Breton"),
    LocaleEntry(0x0080, "ug", "Uighur"),
    LocaleEntry(0x0081, "mi", "Maori"),
    LocaleEntry(0x0082, "oc", "Occitan (post 1500)"),
    LocaleEntry(0x0083, "co", "Corsican"),
    LocaleEntry(0x0084, "gsw", "Swiss German"),
    LocaleEntry(0x0085, "sah", "Yakut"),
    LocaleEntry(0x0086, "qut", "K'iche'"),
    LocaleEntry(0x0087, "rw", "Kinyarwanda"),
    LocaleEntry(0x0088, "wo", "Wolof"),
    LocaleEntry(0x008C, "prs", "Dari"),
    LocaleEntry(0x0091, "gd", "Scottish Gaelic"),
)

# Tags that resolve from string to identifier
STRING_LOOKUP_TAGS = frozenset(
    [
        "ar", "bg", "ca", "cs", "da", "de", "el", "en", "es", "fi", "fr",
        "he", "hr", "hu", "is", "it", "ja", "ko", "nl", "no", "pl", "pt",
        "rm", "ro", "ru",
    ]
)

_ENTRY_BY_IDENTIFIER: Dict[int, LocaleEntry] = {
    entry.identifier: entry for entry in LANGUAGE_TABLE
}

_IDENTIFIER_BY_CODE: Dict[str, int] = {
    entry.tag: entry.identifier
    for entry in LANGUAGE_TABLE
    if entry.tag in STRING_LOOKUP_TAGS
}


def language_identifier_from_string(
    string: str, string_length: Optional[int] = None
) -> int:
    """Determine the language identifier from a language tag.

    Only the first two characters of the tag are significant, so region or
    script suffixes such as "en-US" or "pt_BR" resolve to the primary
    language. Matching is case-insensitive.

    Args:
        string: The language tag.
        string_length: Number of characters of string to consider.
                       Defaults to the full length of the string.

    Returns:
        The language identifier, or LANGUAGE_IDENTIFIER_UNDEFINED if the tag
        is shorter than two characters or its prefix is not supported.

    Raises:
        InvalidArgumentError: If string is not a str or string_length is
            not an int, is negative or exceeds the string.
    """
    if not isinstance(string, str):
        raise InvalidArgumentError("string", f"expected str, got {type(string).__name__}")

    if string_length is None:
        string_length = len(string)
    elif isinstance(string_length, bool) or not isinstance(string_length, int):
        raise InvalidArgumentError(
            "string length", f"expected int, got {type(string_length).__name__}"
        )

    if string_length < 0:
        raise InvalidArgumentError("string length", "value less than zero")
    if string_length > sys.maxsize:
        raise InvalidArgumentError("string length", "value exceeds maximum")
    if string_length > len(string):
        raise InvalidArgumentError(
            "string length", f"value {string_length} exceeds string size {len(string)}"
        )

    if string_length < 2:
        return LANGUAGE_IDENTIFIER_UNDEFINED

    code = string[:2]
    if not code.isascii():
        return LANGUAGE_IDENTIFIER_UNDEFINED

    return _IDENTIFIER_BY_CODE.get(code.lower(), LANGUAGE_IDENTIFIER_UNDEFINED)


def get_language_entry(language_identifier: int) -> Optional[LocaleEntry]:
    """Retrieve the table entry of a language identifier.

    Raises:
        InvalidArgumentError: If the identifier is not a 32-bit unsigned integer.
    """
    if isinstance(language_identifier, bool) or not isinstance(language_identifier, int):
        raise InvalidArgumentError(
            "language identifier",
            f"expected int, got {type(language_identifier).__name__}",
        )
    if language_identifier < 0 or language_identifier > LANGUAGE_IDENTIFIER_MAXIMUM:
        raise InvalidArgumentError(
            "language identifier",
            f"value 0x{language_identifier:x} out of bounds",
        )
    return _ENTRY_BY_IDENTIFIER.get(language_identifier)


def language_identifier_to_string(language_identifier: int) -> Optional[str]:
    """Return the language tag of a language identifier.

    Args:
        language_identifier: The 32-bit language identifier.

    Returns:
        The canonical language tag, or None if the identifier is not supported.

    Example:
        >>> language_identifier_to_string(0x0007)
        'de'
        >>> language_identifier_to_string(0x7C2E) is None
        True
    """
    entry = get_language_entry(language_identifier)
    if entry is None:
        return None
    return entry.tag


def get_language_name(language_identifier: int) -> Optional[str]:
    """Return the English name of a language identifier, or None if not supported."""
    entry = get_language_entry(language_identifier)
    if entry is None:
        return None
    return entry.name
