# src/g4rings/levelgen/rings.py
# Per-ring obstacle generators. Each takes a difficulty (1..4), a distance
# from the centre and a random source, and returns the ring's elements.

import math
from typing import List, Optional
from .. import config
from ..config import GeneratorConfig
from ..elements import Ball, Bar, MarqueeBar, PulsingBall, RingElement, wrap_angle
from .arrangement import generate_angle_arrangement, round_half_up

def _span(angles: List[float], i: int, j: int) -> float:
    # Arc length from angles[i] forward to angles[j], always positive.
    length = angles[j] - angles[i]
    if length <= 0:
        length += 1
    return length

def generate_inner_ring(
    difficulty: int,
    distance: float,
    rng,
    cfg: Optional[GeneratorConfig] = None,
) -> List[RingElement]:
    """
    Big balls alternating with capped bars. Index 0 is always a ball so the
    ring is never a closed wall of bars.
    """
    cfg = cfg or config.DEFAULTS
    n = 2
    if difficulty == 2:
        n = math.floor(rng.random() * 2) + 2
    if difficulty == 3:
        n = 4
    n += round_half_up(rng.random() * 2)

    angles = generate_angle_arrangement(n, True, difficulty < 3, rng)

    elements: List[RingElement] = []
    for i in range(n):
        is_ball = rng.random() >= 0.5

        if is_ball or i == 0:
            elements.append(Ball(angles[i], distance, cfg.inner_ball_radius))
            # ~30% chance of two decoys flanking the ball
            if rng.random() >= 0.7 and difficulty > 1 and i > 0:
                off = cfg.inner_decoy_offset
                elements.append(Ball(wrap_angle(angles[i] + off), distance, cfg.inner_decoy_radius))
                elements.append(Ball(wrap_angle(angles[i] - off), distance, cfg.inner_decoy_radius))
        else:
            start = angles[i]
            length = _span(angles, i, (i + 1) % n)
            elements.append(Bar(start, length, distance, cfg.inner_bar_radius))

            if rng.random() >= 0.5:
                elements.append(Ball(start, distance, cfg.inner_cap_radius))
                elements.append(Ball(wrap_angle(start + length), distance, cfg.inner_cap_radius))

    return elements

def generate_middle_ring(
    difficulty: int,
    distance: float,
    rng,
    cfg: Optional[GeneratorConfig] = None,
) -> List[RingElement]:
    cfg = cfg or config.DEFAULTS
    if difficulty == 1:
        return []
    n = (difficulty - 1) * 2
    if difficulty == 3 and rng.random() >= 0.6:
        n = 6

    angles = generate_angle_arrangement(n, False, False, rng)

    elements: List[RingElement] = []
    for i in range(n // 2):
        start = angles[2 * i]
        length = _span(angles, 2 * i, 2 * i + 1)
        if difficulty == 3 and rng.random() >= 0.5:
            elements.append(MarqueeBar.create(start, length, distance, cfg.middle_bar_radius, cfg.sweep_freq))
        else:
            elements.append(Bar(start, length, distance, cfg.middle_bar_radius))
    return elements

def generate_outer_ring(
    difficulty: int,
    distance: float,
    rng,
    cfg: Optional[GeneratorConfig] = None,
) -> List[RingElement]:
    """
    A loose necklace of small balls, every other one pulsing on some rings.
    From difficulty 3 short bars sit in the gaps between angle pairs.
    """
    cfg = cfg or config.DEFAULTS
    if difficulty == 1 and rng.random() >= 0.5:
        return []
    n = 3 + round_half_up(1.2 * difficulty * rng.random())
    is_pulsing = rng.random() >= 0.5 and difficulty > 1
    with_bars = difficulty > 2

    angles = generate_angle_arrangement(n, False, False, rng)

    elements: List[RingElement] = []
    for i, angle in enumerate(angles):
        if is_pulsing and i % 2:
            elements.append(PulsingBall.create(angle, distance, cfg.outer_ball_radius, cfg.pulse_freq))
        else:
            elements.append(Ball(angle, distance, cfg.outer_ball_radius))

    if with_bars:
        # ceil(n/2): with odd n the last pair wraps around to angle 0
        for i in range((n + 1) // 2):
            a1 = angles[2 * i]
            a2 = angles[(2 * i + 1) % n]
            if a2 < a1:
                a2 += 1
            length = (a2 - a1) * (rng.random() * 0.4 + 0.2)
            start = (a1 + a2) / 2 - length / 2
            elements.append(Bar(wrap_angle(start), length, distance, cfg.outer_bar_radius))

    return elements

def generate_denise_ring(
    difficulty: int,
    distance: float,
    rng,
    cfg: Optional[GeneratorConfig] = None,
) -> List[RingElement]:
    """
    Thin bars over even angle pairs; the odd gaps between them are strung
    with 2..4 tiny evenly spaced balls.
    """
    cfg = cfg or config.DEFAULTS
    if difficulty == 1:
        return []
    n = (difficulty - 1) * 2
    if difficulty == 3 and rng.random() >= 0.6:
        n = 6
    if difficulty == 4:
        n = math.floor(rng.random() * 2) * 4 + 4

    angles = generate_angle_arrangement(n, False, False, rng)

    elements: List[RingElement] = []
    for i in range(n // 2):
        start = angles[2 * i]
        length = _span(angles, 2 * i, 2 * i + 1)
        if difficulty >= 3 and rng.random() >= 0.5:
            elements.append(MarqueeBar.create(start, length, distance, cfg.denise_bar_radius, cfg.sweep_freq))
        else:
            elements.append(Bar(start, length, distance, cfg.denise_bar_radius))

    for i in range(1, n, 2):
        start = angles[i]
        length = _span(angles, i, (i + 1) % n)
        num = round_half_up(rng.random() * 2 + 1)   # 1..3
        for j in range(1, num + 2):
            a = start + (j / (num + 2)) * length
            elements.append(Ball(wrap_angle(a), distance, cfg.denise_ball_radius))

    return elements
