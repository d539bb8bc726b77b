# src/g4rings/levelgen/arrangement.py
# Evenly spaced ring angles with an occasional, narrow irregularity.

import math
from typing import List
from ..elements import wrap_angle

def round_half_up(x: float) -> int:
    # The progression was tuned with half-up rounding, not banker's rounding.
    return int(math.floor(x + 0.5))

def generate_angle_arrangement(n: int, is_small: bool, is_easy: bool, rng) -> List[float]:
    """
    n angles at i/n. Half the time (never when is_easy) a shift of 1/(3n)
    with a random sign is applied:
      - n == 4: odd indices move by +sign*shift
      - n == 6 and not is_small: i%3 == 0 moves by +sign*shift,
        i%3 == 1 by -sign*shift
    Any other n stays uniform. Both coins are always drawn so the stream
    position does not depend on n.
    """
    angle_between = 1 / n
    shift = angle_between / 3

    is_shifted = rng.random() >= 0.5
    if is_easy:
        is_shifted = False
    sign = 1 if rng.random() >= 0.5 else -1

    angles = []
    for i in range(n):
        angle = i * angle_between
        if is_shifted and n == 4 and i % 2:
            angle += sign * shift
        elif is_shifted and n == 6 and not is_small:
            if i % 3 == 0:
                angle += sign * shift
            elif i % 3 == 1:
                angle -= sign * shift
        angles.append(wrap_angle(angle))
    return angles
