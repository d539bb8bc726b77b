# src/g4rings/render/snapshot.py
# Static PNG of a generated level using Pillow. Debug aid only: no animation.

from __future__ import annotations
import math
import os
from typing import Tuple
from PIL import Image, ImageDraw

from ..elements import Ball, Bar, GameData, MarqueeBar, PulsingBall, Ring

BACKGROUND = (24, 24, 24, 255)
COLOR_BALL = (236, 208, 55, 255)
COLOR_PULSING = (255, 169, 107, 255)
COLOR_BAR = (181, 97, 145, 255)
COLOR_MARQUEE = (120, 200, 255, 255)
COLOR_DISTRACTION = (90, 90, 90, 255)
COLOR_CANNON = (255, 255, 255, 255)

# Outermost generated rings sit at 400 scene units; leave room for radii.
SCENE_EXTENT = 460

def polar(cx: float, cy: float, angle: float, dist: float) -> Tuple[float, float]:
    """Turn-fraction angle (0 = up, clockwise) to canvas coords."""
    a = angle * 2 * math.pi
    return cx + dist * math.sin(a), cy - dist * math.cos(a)

def element_color(el, distraction: bool):
    if distraction:
        return COLOR_DISTRACTION
    if isinstance(el, PulsingBall):
        return COLOR_PULSING
    if isinstance(el, MarqueeBar):
        return COLOR_MARQUEE
    if isinstance(el, Bar):
        return COLOR_BAR
    return COLOR_BALL

def ring_rotation(game_data: GameData, ring: Ring, extra: float = 0.0) -> float:
    """Level rotation (plus `extra`) scaled by the ring's speed, then its own offset."""
    return (game_data.rotation + extra) * ring.speed_mult + ring.rotation

def _draw_ball(draw, cx, cy, scale, el, rotation, color):
    x, y = polar(cx, cy, el.angle + rotation, el.distance * scale)
    r = max(1.0, el.radius * scale)
    draw.ellipse((x - r, y - r, x + r, y + r), fill=color)

def _draw_bar(draw, cx, cy, scale, el, rotation, color):
    d = el.distance * scale
    w = max(1, int(round(2 * el.radius * scale)))
    # Pillow measures arcs clockwise from 3 o'clock in degrees; ours start at 12.
    start = (el.angle_start + rotation) * 360 - 90
    end = start + el.angle_length * 360
    box = (cx - d - w / 2, cy - d - w / 2, cx + d + w / 2, cy + d + w / 2)
    draw.arc(box, start, end, fill=color, width=w)

def render_game_data(game_data: GameData, size: int = 512, rotation: float = 0.0) -> Image.Image:
    """
    Draw every ring turned by ring_rotation(game_data, ring, rotation):
    game_data.rotation plus `rotation`, times the ring's speed_mult, plus
    ring.rotation. Distraction rings are drawn first, in grey.
    """
    img = Image.new("RGBA", (size, size), BACKGROUND)
    draw = ImageDraw.Draw(img)
    cx = cy = size / 2
    scale = (size / 2) / SCENE_EXTENT

    rings = sorted(game_data.rings, key=lambda r: not r.is_distraction)
    for ring in rings:
        rot = ring_rotation(game_data, ring, rotation)
        for el in ring.items:
            color = element_color(el, ring.is_distraction)
            if isinstance(el, (Ball, PulsingBall)):
                _draw_ball(draw, cx, cy, scale, el, rot, color)
            else:
                _draw_bar(draw, cx, cy, scale, el, rot, color)

    # cannon marker at the centre
    r = max(2.0, 12 * scale)
    draw.ellipse((cx - r, cy - r, cx + r, cy + r), outline=COLOR_CANNON, width=2)
    return img

def save_snapshot(game_data: GameData, out_png: str, size: int = 512, rotation: float = 0.0) -> str:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_game_data(game_data, size=size, rotation=rotation).save(out_png)
    return out_png
