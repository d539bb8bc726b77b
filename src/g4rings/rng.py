import os
from dataclasses import dataclass

A = 16807
M = 0x7FFFFFFF  # 2^31-1

def pm_next(state: int) -> int:
    return (state * A) % M

@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator. Anything exposing random() in
    [0,1) can stand in for it (random.Random works too); the level generator
    only ever calls random().
    """
    state: int

    def __post_init__(self):
        if not (0 < self.state < M):
            raise ValueError(f"seed must be in 1..{M - 1}, got {self.state}")

    @classmethod
    def from_entropy(cls) -> "PMRandom":
        seed = int.from_bytes(os.urandom(4), "little") % (M - 1) + 1
        return cls(seed)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # next32 is 1..M-1, so this never reaches 1.0
        return self.next32() / M

def normalize_seed(seed: int) -> int:
    """Fold any integer into the valid 1..M-1 seed range."""
    return seed % (M - 1) + 1

def seed_for_level(base_seed: int, level_index: int) -> int:
    """
    Per-level seed: step the stream once per level past the base seed, so a
    run of levels is reproducible from one number.
    """
    s = normalize_seed(base_seed)
    for _ in range(level_index + 1):
        s = pm_next(s)
    return s
