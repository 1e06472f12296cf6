# ABOUTME: Parser for library-style media names like "Friends (1994) [tuimdb=1] {DVD Order}".
# ABOUTME: Extracts title, year, bracketed provider IDs and the episode-ordering hint.

import re

from tuimdb.metadata.types import ParsedName, ProviderIds

# Year in parentheses: "(1994)". Only exactly four digits qualify.
_YEAR_RE = re.compile(r"\((\d{4})\)")

# Provider IDs in square brackets: "[tuimdb=123]". Keys cannot contain "=" or "]".
_PROVIDER_ID_RE = re.compile(r"\[(?P<key>[^\]=]+)=(?P<value>[^\]]+)\]")

# Episode ordering in curly braces: "{Standard Order}".
_ORDERING_RE = re.compile(r"\{([^}]+)\}")

# A trailing file extension: a dot followed by a short alphanumeric run.
_EXTENSION_RE = re.compile(r"\.[A-Za-z0-9]{1,5}$")

_PATH_SEPARATOR_RE = re.compile(r"[\\/]")


def name_from_path(path: str) -> str:
    """Reduce a file or folder path to the bare name parse_name expects.

    Drops the directory part and a trailing file extension. Dots followed by
    anything that does not look like an extension ("Dr. No (1962)") are kept.
    """
    if not path:
        return ""
    base = _PATH_SEPARATOR_RE.split(path.rstrip("\\/"))[-1]
    return _EXTENSION_RE.sub("", base)


def _strip_groups(text: str) -> str:
    # Removing one group can join the text around it into another, as in
    # "((1999)1998)" or "(19{x}99)", so strip until nothing matches.
    while True:
        stripped = _ORDERING_RE.sub("", _PROVIDER_ID_RE.sub("", _YEAR_RE.sub("", text)))
        if stripped == text:
            return text
        text = stripped


def parse_name(raw: str | None) -> ParsedName:
    """Parse an on-disk name into its structured parts.

    Each pass removes what it matched before the next pass runs: year first,
    then provider IDs, then the ordering hint. Whatever remains, trimmed, is
    the title, so parsing the title again extracts nothing. Never raises;
    empty input gives an empty title.
    """
    if not raw or not raw.strip():
        return ParsedName(title="")

    text = raw

    year: int | None = None
    year_match = _YEAR_RE.search(text)
    if year_match:
        year = int(year_match.group(1))
        text = _YEAR_RE.sub("", text)

    external_ids = ProviderIds()
    for match in _PROVIDER_ID_RE.finditer(text):
        key = match.group("key").strip()
        if key:
            external_ids[key] = match.group("value").strip()
    text = _PROVIDER_ID_RE.sub("", text)

    ordering_hint: str | None = None
    ordering_match = _ORDERING_RE.search(text)
    if ordering_match:
        ordering_hint = ordering_match.group(1).strip() or None
        text = _ORDERING_RE.sub("", text)

    return ParsedName(
        title=_strip_groups(text).strip(),
        year=year,
        external_ids=external_ids,
        ordering_hint=ordering_hint,
    )
