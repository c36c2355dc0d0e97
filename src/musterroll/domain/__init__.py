"""Domain model for Musterroll.

Everything that understands army lists lives here and runs purely in memory:

* Dataclasses for parsed lists, enriched lists and allocations (see :mod:`models`).
* Enumerations and strongly-typed identifiers.
* Rule configuration objects (see :mod:`rules_config`).
* The text parser, the catalog matchers and the enrichment engine.
* Pure allocation commands for leader pairings and transport embarkation.

Catalog access goes through :class:`musterroll.interfaces.IReferenceIndex`,
so nothing in this package knows where the catalog came from.
"""

from . import (
    allocation,
    enrichment,
    enums,
    leaders,
    models,
    name_matching,
    normalize,
    parser,
    rules_config,
    transport,
    weapons,
)

__all__ = [
    "allocation",
    "enrichment",
    "enums",
    "leaders",
    "models",
    "name_matching",
    "normalize",
    "parser",
    "rules_config",
    "transport",
    "weapons",
]
