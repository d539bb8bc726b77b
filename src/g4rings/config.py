from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class GeneratorConfig:
    # inner, middle, outer for the default three-ring layout
    ring_distances: Tuple[float, float, float] = (200, 300, 400)
    ring_speeds: Tuple[float, float, float] = (1, 0.5, 0.25)

    # Inner ring
    inner_ball_radius: float = 50
    inner_decoy_radius: float = 20
    inner_decoy_offset: float = 0.08
    inner_bar_radius: float = 10
    inner_cap_radius: float = 30

    # Middle / outer rings
    middle_bar_radius: float = 10
    outer_ball_radius: float = 20
    outer_bar_radius: float = 10
    pulse_freq: float = 2
    sweep_freq: float = 1

    # Denise ring
    denise_bar_radius: float = 2
    denise_ball_radius: float = 4

# Global defaults (can be swapped by launcher)
DEFAULTS = GeneratorConfig()
