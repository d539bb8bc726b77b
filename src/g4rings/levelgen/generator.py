# src/g4rings/levelgen/generator.py
# Level entry point: (level index, record, mode) -> GameData.

import logging
from typing import Optional
from ..elements import Cannon, GameData, SlowMode
from ..modes.registry import ModeRegistry, default_registry
from ..rng import PMRandom

log = logging.getLogger(__name__)

_registry: Optional[ModeRegistry] = None

def get_registry() -> ModeRegistry:
    """Process-wide registry, built with the shipped modes on first use."""
    global _registry
    if _registry is None:
        _registry = default_registry()
    return _registry

def generate(
    level_index: int,
    user_record: float,
    mode: str,
    rng=None,
    registry: Optional[ModeRegistry] = None,
) -> GameData:
    """
    Build the descriptor for one level start. Rings come from whichever
    provider is registered under `mode`; an unknown mode gives a level with
    no rings. Pass a seeded PMRandom for reproducible levels.
    """
    if rng is None:
        rng = PMRandom.from_entropy()
    if registry is None:
        registry = get_registry()

    provider = registry.get(mode)
    if provider is None:
        log.debug("mode %r is not registered; generating an empty level", mode)
        rings = []
    else:
        rings = provider.get_rings(level_index, rng)

    data = GameData(
        level_index=level_index,
        user_record=user_record,
        mode=mode,
        rings=rings,
        rotation=0.0,
        cannon=Cannon(),
        slow=SlowMode(),
    )
    log.debug(
        "level %d (%s): %d rings, %d elements",
        level_index, mode, len(rings), sum(len(r.items) for r in rings),
    )
    return data
