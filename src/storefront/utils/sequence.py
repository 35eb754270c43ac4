"""Integer identity sequences.

Every aggregate and entity in the storefront is keyed by an integer that is
unique per entity type and increases monotonically in creation order.

A sequence starts after the highest identifier already stored for its entity
type, looked up once on first use. Restarting the process over a persistent
provider therefore continues numbering instead of colliding with old rows.
"""

import itertools
import threading

from protean.utils.globals import current_domain

_lock = threading.Lock()
_sequences = {}


def highest_stored_id(entity_cls) -> int:
    """Largest identifier persisted for ``entity_cls``, or 0 when there is none."""
    dao = current_domain.repository_for(entity_cls)._dao
    latest = dao.query.order_by("-id").limit(1).all().first
    return latest.id if latest is not None else 0


def next_id(kind: str, entity_cls=None) -> int:
    """Return the next identifier for the given entity type.

    ``entity_cls`` names the stored type the sequence continues from.
    """
    with _lock:
        if kind not in _sequences:
            start = highest_stored_id(entity_cls) if entity_cls is not None else 0
            _sequences[kind] = itertools.count(start + 1)
        return next(_sequences[kind])


def reset_sequences() -> None:
    """Forget every sequence; each restarts from the stored high-water mark."""
    with _lock:
        _sequences.clear()
