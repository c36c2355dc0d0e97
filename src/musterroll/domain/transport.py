"""Transport capacity extraction.

Datasheets describe transport rules in prose, for example::

    This model has a transport capacity of 22 Orks Infantry models. Each
    Mega Armour or Jump Pack model takes up the space of 2 models. The
    Ghazghkull Thraka model takes up the space of 4 models.

:func:`parse_transport_capacity` turns that into a :class:`TransportCapacity`.
Keyword multipliers apply to every model of a unit carrying the keyword;
model multipliers apply only to the stat line with that exact name.
"""

from __future__ import annotations

import re

from .enums import MultiplierMatch
from .models import TransportCapacity, TransportMultiplier
from .normalize import strip_html

_CAPACITY_RE = re.compile(r"transport capacity of (\d+)", re.IGNORECASE)
_EACH_RE = re.compile(
    r"each\s+([^.]+?)\s+models?\s+takes?\s+up\s+the\s+space\s+of\s+(\d+)\s+models?",
    re.IGNORECASE,
)
# Only at a sentence boundary, so "...each of the X model takes..." is not picked up.
_THE_MODEL_RE = re.compile(
    r"(?:^|[.!]\s+)the\s+([^.]+?)\s+model\s+takes?\s+up\s+the\s+space\s+of\s+(\d+)\s+models?",
    re.IGNORECASE,
)
_EXCLUSION_RE = re.compile(r"cannot\s+transport\s+([^.]+?)\s+models", re.IGNORECASE)
_ALTERNATIVES_RE = re.compile(r"\s*,\s*(?:or\s+)?|\s+or\s+", re.IGNORECASE)


def split_alternatives(phrase: str) -> list[str]:
    """``"Jump Pack or Ghazghkull Thraka"`` -> ``["Jump Pack", "Ghazghkull Thraka"]``."""

    return [part.strip() for part in _ALTERNATIVES_RE.split(phrase) if part.strip()]


def parse_transport_capacity(text: str) -> TransportCapacity | None:
    """Return the structured capacity rule, or ``None`` without a capacity clause."""

    plain = strip_html(text)
    if not plain:
        return None
    capacity = _CAPACITY_RE.search(plain)
    if capacity is None:
        return None

    multipliers: list[TransportMultiplier] = []
    for match in _EACH_RE.finditer(plain):
        slots = int(match.group(2))
        for name in split_alternatives(match.group(1)):
            multipliers.append(TransportMultiplier(name, slots, MultiplierMatch.KEYWORD))

    for match in _THE_MODEL_RE.finditer(plain):
        name = match.group(1).strip()
        if any(existing.name.lower() == name.lower() for existing in multipliers):
            continue
        multipliers.append(TransportMultiplier(name, int(match.group(2)), MultiplierMatch.MODEL))

    exclusions: list[str] = []
    for match in _EXCLUSION_RE.finditer(plain):
        exclusions.extend(split_alternatives(match.group(1)))

    return TransportCapacity(
        base_capacity=int(capacity.group(1)),
        raw_text=plain,
        multipliers=tuple(multipliers),
        exclusions=tuple(exclusions),
    )
