"""Naming utilities for feature code generation."""
import re
from typing import Dict, List


IRREGULAR_PLURALS: Dict[str, str] = {
    "person": "people",
    "child": "children",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "mouse": "mice",
    "man": "men",
    "woman": "women",
    "ox": "oxen",
    "leaf": "leaves",
    "life": "lives",
    "knife": "knives",
    "wife": "wives",
    "half": "halves",
    "self": "selves",
    "elf": "elves",
    "loaf": "loaves",
    "potato": "potatoes",
    "tomato": "tomatoes",
    "cactus": "cacti",
    "focus": "foci",
    "fungus": "fungi",
    "nucleus": "nuclei",
    "syllabus": "syllabi",
    "analysis": "analyses",
    "diagnosis": "diagnoses",
    "thesis": "theses",
    "crisis": "crises",
    "phenomenon": "phenomena",
    "criterion": "criteria",
    "datum": "data",
}

VALID_VARIABLE_NAME = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")
INVALID_VARIABLE_CHARS = re.compile(r"[^a-zA-Z0-9_$]")
VALID_LEADING_CHAR = re.compile(r"^[a-zA-Z_$]")


def to_camel_case(name: str) -> str:
    """Convert space separated words to camelCase."""
    s1 = re.sub(r"\s+(.)", lambda m: m.group(1).upper(), name)
    s2 = re.sub(r"\s", "", s1)
    return s2[:1].lower() + s2[1:]


def to_pascal_case(name: str) -> str:
    """Convert space separated words to PascalCase."""
    s1 = re.sub(r"\w+", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), name)
    return re.sub(r"\s+", "", s1)


def _split_words(name: str, separator: str) -> str:
    # Uppercase letters and whitespace runs both start a new word
    s1 = re.sub(r"([A-Z])", separator + r"\1", name.strip())
    s2 = re.sub(r"\s+" + re.escape(separator) + "?", separator, s1)
    s3 = s2.lower()
    # Drop a single leading separator
    return s3[len(separator):] if s3.startswith(separator) else s3


def to_snake_case(name: str) -> str:
    """Convert PascalCase, camelCase or spaced words to snake_case."""
    return _split_words(name, "_")


def to_kebab_case(name: str) -> str:
    """Convert PascalCase, camelCase or spaced words to kebab-case."""
    return _split_words(name, "-")


def pluralize(word: str) -> str:
    """
    Return the English plural of a word.

    Irregular nouns keep the capitalization of the first letter. Already
    plural input is not detected, so ``pluralize("boxes") == "boxeses"``.
    """
    if not word:
        return ""

    irregular = IRREGULAR_PLURALS.get(word.lower())
    if irregular:
        if word[0].isupper():
            return irregular[0].upper() + irregular[1:]
        return irregular

    if word.endswith("y") and word[-2:-1].lower() not in ("a", "e", "i", "o", "u"):
        return word[:-1] + "ies"
    if word.endswith(("s", "x", "z", "ch", "sh")):
        return word + "es"
    return word + "s"


def is_valid_variable_name(name: str) -> bool:
    """Check that name can be used as a JavaScript identifier."""
    return bool(VALID_VARIABLE_NAME.fullmatch(name))


def sanitize_variable_name(name: str) -> str:
    """Replace invalid identifier characters and fix the leading character."""
    sanitized = INVALID_VARIABLE_CHARS.sub("_", name)
    if not VALID_LEADING_CHAR.match(sanitized):
        sanitized = "_" + sanitized
    return sanitized


def create_default_options(name: str, count: int = 3) -> List[Dict[str, str]]:
    """Build placeholder options for a newly created choice field."""
    return [
        {
            "label": f"{name} Option {i}",
            "value": f"{to_camel_case(name)}_option_{i}",
        }
        for i in range(1, count + 1)
    ]


def capitalize_first(name: str) -> str:
    """Upper-case only the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def js_quote(value) -> str:
    """Render a value as a single-quoted JavaScript string literal."""
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"
