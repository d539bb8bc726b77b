# src/g4rings/modes/provider.py
from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..config import GeneratorConfig
from ..elements import Ring
from ..engine.motion import move_element
from ..levelgen.dispatch import generate_rings

@dataclass(frozen=True)
class ThemeColors:
    background: str
    damage: str
    foreground: str
    obstacle1: str
    obstacle2: str
    cannon: str
    bullet: str

class LevelModeProvider(Protocol):
    """
    A game mode: ring layout per level plus per-frame element motion.
    Third-party modes implement this and are registered by name.
    """
    name: str

    def get_rings(self, level_index: int, rng) -> List[Ring]: ...

    def move_element(self, element, d_time: float, d_raw_time: float, absolute_time: float) -> None: ...

    def theme_colors(self) -> Optional[ThemeColors]: ...

class BuiltinModeProvider:
    """One of the shipped modes, laid out by the built-in dispatch table."""

    def __init__(self, name: str, cfg: Optional[GeneratorConfig] = None):
        self.name = name
        self.cfg = cfg

    def get_rings(self, level_index: int, rng) -> List[Ring]:
        return generate_rings(self.name, level_index, rng, self.cfg)

    def move_element(self, element, d_time: float, d_raw_time: float, absolute_time: float) -> None:
        move_element(element, d_time, d_raw_time, absolute_time)

    def theme_colors(self) -> Optional[ThemeColors]:
        # None: the game picks its own palette for built-in modes
        return None

    def __repr__(self) -> str:
        return f"BuiltinModeProvider({self.name!r})"
