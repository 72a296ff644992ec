"""Fixed-size pool of falling columns."""

import logging

logger = logging.getLogger(__name__)


def create_pool(model, count):
    """Build ``count`` positions spread over the full surface height."""
    if count <= 0:
        raise ValueError("pool size must be positive")
    return tuple(model.spawn() for _ in range(count))


def advance_all(model, pool):
    """Advance every slot one tick. Same length, same slot order."""
    advanced = tuple(model.advance(p) for p in pool)
    if logger.isEnabledFor(logging.DEBUG):
        respawns = sum(1 for p in advanced if p.respawned)
        if respawns:
            logger.debug("advance: %d of %d columns respawned", respawns, len(advanced))
    return advanced
