#!/usr/bin/env python3
# Render generated levels to PNGs using Pillow.

import argparse, logging, os
from g4rings.levelgen.generator import generate
from g4rings.render.snapshot import save_snapshot
from g4rings.rng import PMRandom, seed_for_level

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--mode", type=str, default="normal", help="Mode name (easy, normal, hard, ...)")
    ap.add_argument("--first", type=int, default=0, help="First level index")
    ap.add_argument("--count", type=int, default=12, help="How many levels")
    ap.add_argument("--seed", type=int, default=None, help="Base seed for reproducible output")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--size", type=int, default=512, help="Image size in pixels")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    out = os.path.join(args.outdir, args.mode)
    for lvl in range(args.first, args.first + args.count):
        rng = PMRandom(seed_for_level(args.seed, lvl)) if args.seed is not None else None
        data = generate(lvl, 0, args.mode, rng=rng)
        save_snapshot(data, os.path.join(out, f"{lvl:03d}.png"), size=args.size)
    print(f"Wrote PNGs to {out}")

if __name__ == "__main__":
    main()
