#!/usr/bin/env python3
# Minimal interactive viewer for generated levels (no gameplay).
# - Rings rotate and elements move through the mode's provider
# - Next/previous level: RIGHT / LEFT
# - Regenerate the same level: R
# - Cycle registered modes: M
# - Slow motion toggle: S
# - 60 Hz fixed loop

import argparse, logging, math
import pygame
from g4rings.elements import Ball, PulsingBall
from g4rings.levelgen.generator import generate, get_registry
from g4rings.render.snapshot import (
    SCENE_EXTENT, polar, element_color, ring_rotation,
)

ROTATION_SPEED = 0.25   # turns per second for a ring with speed_mult 1
SLOW_FACTOR = 0.3

def draw_level(screen, data, size):
    screen.fill((24, 24, 24))
    cx = cy = size / 2
    scale = (size / 2) / SCENE_EXTENT
    for ring in sorted(data.rings, key=lambda r: not r.is_distraction):
        rot = ring_rotation(data, ring)
        for el in ring.items:
            color = element_color(el, ring.is_distraction)[:3]
            if isinstance(el, (Ball, PulsingBall)):
                x, y = polar(cx, cy, el.angle + rot, el.distance * scale)
                pygame.draw.circle(screen, color, (int(x), int(y)), max(1, int(el.radius * scale)))
            else:
                d = el.distance * scale
                w = max(1, int(round(2 * el.radius * scale)))
                # pygame arcs run counter-clockwise from 3 o'clock in radians
                a0 = (el.angle_start + rot) * 2 * math.pi
                a1 = a0 + el.angle_length * 2 * math.pi
                rect = pygame.Rect(0, 0, 2 * d + w, 2 * d + w)
                rect.center = (int(cx), int(cy))
                pygame.draw.arc(screen, color, rect, math.pi / 2 - a1, math.pi / 2 - a0, w)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--mode", type=str, default="normal", help="Starting mode")
    ap.add_argument("--level", type=int, default=0, help="Starting level index")
    ap.add_argument("--size", type=int, default=640, help="Window size in pixels")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    registry = get_registry()
    modes = registry.names()
    mode = args.mode if args.mode in registry else modes[0]
    level = args.level

    pygame.init()
    screen = pygame.display.set_mode((args.size, args.size))
    clock = pygame.time.Clock()

    def load():
        pygame.display.set_caption(f"g4rings viewer: {mode} level {level}")
        return generate(level, 0, mode)

    data = load()
    provider = registry.get(mode)
    t = 0.0
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    level += 1; data = load()
                elif ev.key == pygame.K_LEFT:
                    level = max(0, level - 1); data = load()
                elif ev.key == pygame.K_r:
                    data = load()
                elif ev.key == pygame.K_m:
                    mode = modes[(modes.index(mode) + 1) % len(modes)]
                    provider = registry.get(mode)
                    data = load()
                elif ev.key == pygame.K_s:
                    data.slow.is_slow = not data.slow.is_slow

        raw_dt = clock.tick(60) / 1000.0
        dt = raw_dt * (SLOW_FACTOR if data.slow.is_slow else 1.0)
        t += dt
        # kept unwrapped; ring_rotation scales it by speed_mult
        data.rotation += dt * ROTATION_SPEED
        for ring in data.rings:
            for el in ring.items:
                provider.move_element(el, dt, raw_dt, t)

        draw_level(screen, data, args.size)
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
