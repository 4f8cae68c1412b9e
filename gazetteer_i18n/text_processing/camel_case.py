"""
Camel-case conversion for message identifiers.

Converts translated place names such as "Tonle Bassac" into identifier tokens
("tonleBassac"). Word boundaries are the separator characters ``_ . -`` and
space, plus case transitions inside the text ("TonleBassac" and
"TONLEBassac" split before "Bassac").

Only ASCII word characters are upper-cased after a separator. A separator
followed by anything else (an apostrophe, a bracket, a non-Latin letter) is
left in place, so callers still have to clean the token.
"""

from __future__ import annotations

import re

_LEADING_SEPARATORS = re.compile(r"^[_.\- ]+")
_SEPARATOR_RUN = re.compile(r"[_.\- ]+(\w|\Z)", re.ASCII)
_LOWER_ALNUM = re.compile(r"^[a-z\d]+\Z", re.ASCII)
_ASCII_LETTER = re.compile(r"[a-zA-Z]")


def camel_case(text: str) -> str:
    """Return the camel-case token for ``text``: first segment lower-case, no separators."""
    text = text.strip()
    if not text:
        return ""
    if len(text) == 1:
        return text.lower()
    if _LOWER_ALNUM.match(text):
        return text

    if text != text.lower():
        text = _mark_case_boundaries(text)

    text = _LEADING_SEPARATORS.sub("", text).lower()
    return _SEPARATOR_RUN.sub(lambda match: match.group(1).upper(), text)


def _mark_case_boundaries(text: str) -> str:
    """
    Insert ``-`` where the case changes mark a new word.

    Two boundaries are recognised: lower -> Upper ("tonleBassac") and the last
    capital of an upper-case run that is followed by a lower-case letter
    ("TONLEBassac" -> "TONLE-Bassac").
    """
    last_lower = False
    last_upper = False
    last_last_upper = False

    i = 0
    while i < len(text):
        char = text[i]
        is_letter = bool(_ASCII_LETTER.match(char))

        if last_lower and is_letter and char.upper() == char:
            text = text[:i] + "-" + text[i:]
            last_lower = False
            last_last_upper = last_upper
            last_upper = True
            i += 1
        elif last_upper and last_last_upper and is_letter and char.lower() == char:
            text = text[: i - 1] + "-" + text[i - 1 :]
            last_last_upper = last_upper
            last_upper = False
            last_lower = True
        else:
            last_lower = char.lower() == char
            last_last_upper = last_upper
            last_upper = char.upper() == char
        i += 1

    return text
