"""
Helpers that treat one query-string key as a set of string values.

A set can arrive as repeated keys (?festival=edc&festival=ultra) or as a
comma-delimited value (?festival=edc,ultra). Sets are always written back
as repeated keys, which is what Django's QueryDict.getlist() expects.
"""

from typing import Iterable, List, Tuple
from urllib.parse import parse_qsl, urlencode


def _pairs(search: str) -> List[Tuple[str, str]]:
    if not search:
        return []
    # parse_qsl is lenient: junk segments come back as odd keys or are skipped
    return parse_qsl(search.lstrip('?'), keep_blank_values=True)


def _build_url(pathname: str, pairs: List[Tuple[str, str]]) -> str:
    query = urlencode(pairs)
    return f"{pathname}?{query}" if query else pathname


def _split(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(',') if part.strip()]


def get_array_param(search: str, key: str) -> List[str]:
    """
    All values of `key` in first-seen order, without duplicates.
    Returns [] when the key is absent or the query string is malformed.
    """
    values = []
    for name, raw in _pairs(search):
        if name != key:
            continue
        for value in _split(raw):
            if value not in values:
                values.append(value)
    return values


def toggle_array_param(pathname: str, search: str, key: str, value: str) -> str:
    """
    Add `value` to the set under `key`, or remove it if already there.

    The key keeps its position among the other parameters (a new key goes
    last); a key left without values is dropped, and blank values under
    `key` are not written back. Other parameters are kept as they are.
    """
    values = get_array_param(search, key)
    if value in values:
        values.remove(value)
    else:
        values.append(value)

    pairs = []
    written = False
    for name, raw in _pairs(search):
        if name != key:
            pairs.append((name, raw))
        elif not written:
            pairs.extend((key, v) for v in values)
            written = True
    if not written:
        pairs.extend((key, v) for v in values)

    return _build_url(pathname, pairs)


def remove_params(pathname: str, search: str, keys: Iterable[str]) -> str:
    """Drop every parameter named in `keys`."""
    keys = set(keys)
    pairs = [(name, raw) for name, raw in _pairs(search) if name not in keys]
    return _build_url(pathname, pairs)
