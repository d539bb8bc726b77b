#!/usr/bin/env python3
import argparse, json, logging, os
from g4rings.levelgen.generator import generate
from g4rings.rng import PMRandom, seed_for_level

def make_rng(seed, level):
    if seed is None:
        return PMRandom.from_entropy()
    return PMRandom(seed_for_level(seed, level))

def write_json(data, path):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data.to_dict(), f, indent=2)

def cmd_emit(args):
    data = generate(args.level, args.record, args.mode, rng=make_rng(args.seed, args.level))
    write_json(data, args.out)
    print(f"Wrote {args.out}")

def cmd_dump(args):
    base = os.path.join(args.outdir, args.mode)
    for lvl in range(args.first, args.first + args.count):
        data = generate(lvl, args.record, args.mode, rng=make_rng(args.seed, lvl))
        write_json(data, os.path.join(base, f"{lvl:03d}.json"))
    print(f"Wrote {args.count} levels to {base}")

def main():
    p = argparse.ArgumentParser()
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--mode', type=str, default='normal')
    p1.add_argument('--level', type=int, required=True)
    p1.add_argument('--record', type=float, default=0)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('dump')
    p2.add_argument('--mode', type=str, default='normal')
    p2.add_argument('--first', type=int, default=0)
    p2.add_argument('--count', type=int, default=30)
    p2.add_argument('--record', type=float, default=0)
    p2.add_argument('--seed', type=int, default=None)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_dump)
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
