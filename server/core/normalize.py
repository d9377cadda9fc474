# server/core/normalize.py

import re
from core.errors import EmptyUsername


_WORD = re.compile(r"\S+")


def _capitalize(match: re.Match) -> str:
    word = match.group(0)
    return word[:1].title() + word[1:]


def normalize_username(raw: str) -> str:
    """
    Canonical display form of a username: trimmed, lower-cased, then the first
    letter of each whitespace-separated word capitalized. Sign-up and log-in
    both compare against this exact string.
    """
    if not raw:
        raise EmptyUsername()

    username = raw.strip().lower()
    if not username:
        raise EmptyUsername()

    return _WORD.sub(_capitalize, username)
