# src/g4rings/modes/registry.py
import logging
from typing import Dict, List, Optional
from ..levelgen.dispatch import BUILTIN_MODES
from .provider import BuiltinModeProvider, LevelModeProvider

log = logging.getLogger(__name__)

class ModeRegistry:
    """Name -> LevelModeProvider. Populated at startup, read by generate()."""

    def __init__(self):
        self._providers: Dict[str, LevelModeProvider] = {}

    def register(self, provider: LevelModeProvider, replace: bool = False) -> None:
        name = getattr(provider, "name", None)
        if not name:
            raise ValueError("mode provider must have a non-empty name")
        if name in self._providers and not replace:
            raise ValueError(f"mode {name!r} is already registered")
        self._providers[name] = provider
        log.debug("registered mode %r -> %r", name, provider)

    def unregister(self, name: str) -> None:
        # KeyError for unknown names, like dict.pop
        del self._providers[name]

    def get(self, name: str) -> Optional[LevelModeProvider]:
        return self._providers.get(name)

    def names(self) -> List[str]:
        return list(self._providers)

    def __contains__(self, name: str) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)

def default_registry() -> ModeRegistry:
    """A fresh registry holding the seven shipped modes."""
    reg = ModeRegistry()
    for name in BUILTIN_MODES:
        reg.register(BuiltinModeProvider(name))
    return reg
