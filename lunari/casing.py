"""
Casing transfer from an English token to its Lunari translation.

The translation found in the dictionary is recased to follow the shape of
the English token:

- ``HELLO`` -> ``YA`` (all caps, more than one character)
- ``Hello`` -> ``Ya`` (title case)
- ``hello`` -> ``ya`` (lowercase)
- ``hELLo`` -> translation as stored (irregular casing)
"""


def is_all_caps(s: str) -> bool:
    return len(s) > 1 and s == s.upper()


def is_title_case(s: str) -> bool:
    return len(s) > 0 and s[0] == s[0].upper() and s[1:] == s[1:].lower()


def apply_casing(source_token: str, translated: str) -> str:
    """Recase ``translated`` to match the casing shape of ``source_token``.

    Args:
        source_token: The original English token, possessive suffix included
        translated: The dictionary translation

    Returns:
        The recased translation
    """
    if not translated:
        return translated
    if is_all_caps(source_token):
        return translated.upper()
    if is_title_case(source_token):
        return translated[0].upper() + translated[1:].lower()
    if source_token == source_token.lower():
        return translated.lower()
    # Irregular casing such as "iPhone": keep the dictionary form
    return translated
