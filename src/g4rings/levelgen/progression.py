# src/g4rings/levelgen/progression.py
# Hand-tuned (inner, middle, outer) difficulty ramp. 0 means the ring is absent.

from typing import List, Tuple

STATIC_PROGRESSION: Tuple[Tuple[int, int, int], ...] = (
    (1, 0, 0),
    (1, 0, 0),
    (2, 0, 0),
    (2, 0, 0),
    (2, 0, 0),
    (3, 0, 0),
    (3, 0, 1),
    (2, 0, 2),
    (2, 0, 2),
    (2, 0, 2),
    (2, 1, 2),
    (2, 1, 2),
)

# Cycled forever once the static ramp runs out.
LOOPED_PROGRESSION: Tuple[Tuple[int, int, int], ...] = (
    (3, 1, 2),
    (2, 2, 2),
    (2, 2, 2),
    (2, 3, 2),
    (2, 3, 1),
    (2, 2, 2),
    (2, 2, 2),
    (3, 1, 2),
    (2, 1, 2),
    (3, 1, 2),
    (2, 2, 2),
    (2, 2, 2),
    (2, 3, 2),
    (3, 3, 3),
    (2, 2, 2),
    (2, 2, 2),
    (3, 1, 2),
    (2, 1, 2),
)

def get_default_difficulties(level_index: int) -> List[int]:
    """
    Return a fresh [inner, middle, outer] list; callers may mutate it.
    Negative indices land in the looped table (Python modulo).
    """
    if 0 <= level_index < len(STATIC_PROGRESSION):
        return list(STATIC_PROGRESSION[level_index])
    idx = (level_index - len(STATIC_PROGRESSION)) % len(LOOPED_PROGRESSION)
    return list(LOOPED_PROGRESSION[idx])
