# src/g4rings/levelgen/dispatch.py
# Built-in modes: each turns a level index into an ordered list of rings.

import logging
from typing import Callable, Dict, List, Optional, Sequence
from .. import config
from ..config import GeneratorConfig
from ..elements import Ring
from .progression import get_default_difficulties
from .rings import (
    generate_inner_ring, generate_middle_ring,
    generate_outer_ring, generate_denise_ring,
)

log = logging.getLogger(__name__)

def generate_default_rings(
    progression: Sequence[int],
    rng,
    cfg: Optional[GeneratorConfig] = None,
) -> List[Ring]:
    """Inner/middle/outer at the configured distances; zero difficulty skips the ring."""
    cfg = cfg or config.DEFAULTS
    inner, middle, outer = progression
    d_in, d_mid, d_out = cfg.ring_distances
    s_in, s_mid, s_out = cfg.ring_speeds

    rings = []
    if inner:
        rings.append(Ring(generate_inner_ring(inner, d_in, rng, cfg), s_in, False))
    if middle:
        rings.append(Ring(generate_middle_ring(middle, d_mid, rng, cfg), s_mid, False))
    if outer:
        rings.append(Ring(generate_outer_ring(outer, d_out, rng, cfg), s_out, False))
    return rings

def _easy(level_index: int, rng, cfg: GeneratorConfig) -> List[Ring]:
    p = get_default_difficulties(level_index)
    p[0] = max(p[0], 2)
    p[1] = 0
    p[2] = 0
    return generate_default_rings(p, rng, cfg)

def _normal(level_index: int, rng, cfg: GeneratorConfig) -> List[Ring]:
    return generate_default_rings(get_default_difficulties(level_index), rng, cfg)

def _hard(level_index: int, rng, cfg: GeneratorConfig) -> List[Ring]:
    p = [3 if d else 0 for d in get_default_difficulties(level_index)]
    return generate_default_rings(p, rng, cfg)

# The remaining modes are fixed layouts; their distances and speeds belong to
# the mode, while element sizes still come from cfg.

def _hell(level_index: int, rng, cfg: GeneratorConfig) -> List[Ring]:
    return [
        Ring(generate_inner_ring(2, 200, rng, cfg), 1, False),
        Ring(generate_inner_ring(2, 200, rng, cfg), 0.5, False),
        Ring(generate_middle_ring(3, 300, rng, cfg), 0.5, False),
        Ring(generate_outer_ring(3, 400, rng, cfg), 0.25, False),
        Ring(generate_outer_ring(3, 400, rng, cfg), 0.125, False),
    ]

def _hades(level_index: int, rng, cfg: GeneratorConfig) -> List[Ring]:
    return [
        Ring(generate_inner_ring(1, 100, rng, cfg), 1, False),
        Ring(generate_inner_ring(3, 300, rng, cfg), 0.5, False),
        Ring(generate_outer_ring(3, 400, rng, cfg), 0.25, False),
        Ring(generate_outer_ring(3, 400, rng, cfg), 0.125, False),
        # Distractions: drawn, never collide
        Ring(generate_middle_ring(3, 300, rng, cfg), 1, True),
        Ring(generate_outer_ring(3, 400, rng, cfg), 0.5, True),
        Ring(generate_inner_ring(2, 150, rng, cfg), 0.75, True),
    ]

def _denise(level_index: int, rng, cfg: GeneratorConfig) -> List[Ring]:
    return [
        Ring(generate_denise_ring(4, 200, rng, cfg), 1, False),
        Ring(generate_denise_ring(4, 266, rng, cfg), 0.5, False),
        Ring(generate_denise_ring(4, 333, rng, cfg), 0.25, False),
        Ring(generate_denise_ring(4, 400, rng, cfg), 0.125, False),
    ]

def _reverse(level_index: int, rng, cfg: GeneratorConfig) -> List[Ring]:
    return [
        Ring(generate_outer_ring(2, 150, rng, cfg), 1, False),
        Ring(generate_outer_ring(3, 300, rng, cfg), 0.5, False),
    ]

MODE_BUILDERS: Dict[str, Callable[[int, object, GeneratorConfig], List[Ring]]] = {
    "easy": _easy,
    "normal": _normal,
    "hard": _hard,
    "hell": _hell,
    "hades": _hades,
    "denise": _denise,
    "reverse": _reverse,
}

BUILTIN_MODES = tuple(MODE_BUILDERS)

def generate_rings(
    mode: str,
    level_index: int,
    rng,
    cfg: Optional[GeneratorConfig] = None,
) -> List[Ring]:
    """
    Rings for a built-in mode. cfg defaults to config.DEFAULTS as it stands
    at call time, so a launcher may swap it.
    """
    builder = MODE_BUILDERS.get(mode)
    if builder is None:
        log.debug("no built-in layout for mode %r; level %d has no rings", mode, level_index)
        return []
    return builder(level_index, rng, cfg or config.DEFAULTS)
