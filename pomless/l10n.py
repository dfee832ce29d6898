"""
pomless.l10n - Manifest localization

Bundle-Name and Bundle-Vendor may point into a localization file instead
of carrying the text themselves:

    Bundle-Name: %bundleName
    Bundle-Localization: OSGI-INF/l10n/bundle

The key is looked up in the default (locale-less) properties file so that
builds do not depend on the locale of the machine running them. Lookups
never fail: when the file or the entry is missing the key itself is used.
"""

import logging
from pathlib import Path
from typing import Optional

from pomless.config import DEFAULT_LOCALIZATION

logger = logging.getLogger(__name__)

LOCALIZATION_MARKER = "%"
PROPERTIES_SUFFIX = ".properties"

_WHITESPACE = " \t\f"
_KEY_TERMINATORS = "=:" + _WHITESPACE
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _unescape(text: str) -> str:
    result = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\" or i + 1 >= len(text):
            result.append(ch)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2 : i + 6]
            try:
                if len(digits) != 4:
                    raise ValueError(digits)
                result.append(chr(int(digits, 16)))
                i += 6
                continue
            except ValueError:
                # Malformed \u escape, keep it literally
                result.append("u")
                i += 2
                continue
        result.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(result)


def _ends_with_continuation(line: str) -> bool:
    backslashes = len(line) - len(line.rstrip("\\"))
    return backslashes % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    key_end = len(line)
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _KEY_TERMINATORS:
            key_end = i
            break
        i += 1

    rest = line[key_end:].lstrip(_WHITESPACE)
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(_WHITESPACE)
    return line[:key_end], rest


def parse_properties(content: str) -> dict[str, str]:
    """
    Parse text in java.util.Properties format.

    Supports '#' and '!' comments, '=', ':' or whitespace separators,
    backslash line continuation and backslash escapes including \\uXXXX.
    """
    properties: dict[str, str] = {}
    lines = content.replace("\r\n", "\n").replace("\r", "\n").split("\n")

    i = 0
    while i < len(lines):
        line = lines[i].lstrip(_WHITESPACE)
        i += 1
        if not line or line[0] in "#!":
            continue

        while _ends_with_continuation(line):
            line = line[:-1]
            if i >= len(lines):
                break
            line += lines[i].lstrip(_WHITESPACE)
            i += 1

        key, value = _split_entry(line)
        properties[_unescape(key)] = _unescape(value)

    return properties


def load_properties(path: Path) -> dict[str, str]:
    """Load a .properties file. The format is ISO-8859-1 with \\u escapes."""
    with open(path, encoding="latin-1") as f:
        return parse_properties(f.read())


def localization_file(project_root: Path, localization: Optional[str] = None) -> Path:
    """
    Path of the default localization file.

    Bundle-Localization names a base name ("OSGI-INF/l10n/bundle"); the
    default file carries the .properties suffix on top of it.
    """
    location = localization.strip() if localization else ""
    if not location:
        location = DEFAULT_LOCALIZATION
    elif not location.endswith(PROPERTIES_SUFFIX):
        location += PROPERTIES_SUFFIX
    return project_root / location


def resolve_localized(
    value: Optional[str],
    project_root: Path,
    localization: Optional[str] = None,
) -> Optional[str]:
    """
    Resolve a possibly localized header value.

    Args:
        value: Raw header value, e.g. "%bundleName" or "My Bundle"
        project_root: Directory the localization path is relative to
        localization: Bundle-Localization header value, if any

    Returns:
        None for an absent or empty value, the value itself when it has no
        '%' marker, otherwise the translation or, failing that, the bare key.
    """
    if not value:
        return None
    if not value.startswith(LOCALIZATION_MARKER):
        return value

    key = value[len(LOCALIZATION_MARKER) :]
    l10n_file = localization_file(project_root, localization)
    if l10n_file.is_file():
        try:
            translations = load_properties(l10n_file)
        except OSError as e:
            logger.warning("Could not read localization file %s: %s", l10n_file, e)
            return key
        translation = translations.get(key)
        if translation:
            return translation
        logger.debug("No translation for %r in %s", key, l10n_file)
    else:
        logger.debug("Localization file %s not found, using key %r", l10n_file, key)
    return key
