"""Bootstrap loader — reads the profile and roster JSON documents.

Runs once, single-threaded, before the store is shared. Any failure is a
:class:`LoadError`; no default or partial state is ever substituted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO

from pydantic import TypeAdapter, ValidationError

from rosterctl.domain.errors import LoadError
from rosterctl.domain.models import AppState, Friend, Profile

logger = logging.getLogger(__name__)

Source = str | Path | IO[bytes] | IO[str]

_PROFILE_ADAPTER: TypeAdapter[Profile] = TypeAdapter(Profile)
_ROSTER_ADAPTER: TypeAdapter[list[Friend]] = TypeAdapter(list[Friend])


def _describe(source: Source) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return str(getattr(source, "name", "<stream>"))


def _read(source: Source) -> bytes | str:
    """Return the raw document, raising :class:`LoadError` on I/O failure.

    Text streams decode while being read, so a bad byte surfaces here
    rather than in the JSON parser.
    """
    try:
        if isinstance(source, (str, Path)):
            return Path(source).read_bytes()
        return source.read()
    except UnicodeDecodeError as exc:
        raise LoadError(_describe(source), f"cannot decode ({exc.reason})") from exc
    except OSError as exc:
        raise LoadError(_describe(source), exc.strerror or str(exc)) from exc


def _reason(exc: ValidationError) -> str:
    """Condense a pydantic error into one line naming the first problem."""
    first = exc.errors()[0]
    if first["type"] == "json_invalid":
        return f"invalid JSON ({first['msg']})"
    loc = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{loc}: {first['msg']}"


def load_profile(source: Source) -> Profile:
    """Parse the profile document at *source*."""
    name = _describe(source)
    logger.info("Loading profile from %s", name)
    try:
        profile = _PROFILE_ADAPTER.validate_json(_read(source))
    except ValidationError as exc:
        raise LoadError(name, _reason(exc)) from exc
    logger.info("Loaded profile: %s", profile.name)
    return profile


def load_roster(source: Source) -> list[Friend]:
    """Parse the roster document (a JSON array of friends) at *source*."""
    name = _describe(source)
    logger.info("Loading roster from %s", name)
    try:
        friends = _ROSTER_ADAPTER.validate_json(_read(source))
    except ValidationError as exc:
        raise LoadError(name, _reason(exc)) from exc
    logger.info("Loaded %d friends", len(friends))
    return friends


def load_state(profile_source: Source, roster_source: Source) -> AppState:
    """Load both bootstrap documents into a fresh aggregate."""
    state = AppState(profile=load_profile(profile_source), friends=load_roster(roster_source))
    logger.info("Initial state: %s", state.summary())
    return state
