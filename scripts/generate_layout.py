"""Generate a single dungeon layout and print it.

Usage:
    uv run python scripts/generate_layout.py [--seed 12345] [--width 40 --height 40]
        [--png out/layout.png] [--json out/layout.json] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from dungeon_gen.generation import LayoutGenerator
from dungeon_gen.layout import (
    CorridorParams,
    CountRange,
    EntityParams,
    GridExtent,
    RoomParams,
    save_layout,
)
from dungeon_gen.render import render_ascii, save_image
from dungeon_gen.stats import compute_layout_stats, generate_text_report


def build_generator(args: argparse.Namespace) -> LayoutGenerator:
    return LayoutGenerator(
        extent=GridExtent(width=args.width, height=args.height),
        room_params=RoomParams(
            min_size=args.min_room_size,
            max_size=args.max_room_size,
            max_rooms=args.max_rooms,
        ),
        corridor_params=CorridorParams(width=args.corridor_width),
        entity_params=EntityParams(
            default_range=CountRange(low=args.min_collectibles, high=args.max_collectibles),
            place_collectibles=not args.no_collectibles,
        ),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a dungeon layout")
    parser.add_argument("--seed", type=int, default=None, help="Seed (omit for a random one)")
    parser.add_argument("--width", type=int, default=40, help="Grid width")
    parser.add_argument("--height", type=int, default=40, help="Grid height")
    parser.add_argument("--min-room-size", type=int, default=6)
    parser.add_argument("--max-room-size", type=int, default=12)
    parser.add_argument("--max-rooms", type=int, default=8)
    parser.add_argument("--corridor-width", type=int, default=3)
    parser.add_argument("--min-collectibles", type=int, default=1)
    parser.add_argument("--max-collectibles", type=int, default=2)
    parser.add_argument("--no-collectibles", action="store_true", help="Skip collectible placement")
    parser.add_argument("--png", type=str, default=None, help="Write a preview PNG here")
    parser.add_argument("--json", type=str, default=None, help="Write a JSON snapshot here")
    parser.add_argument("--cell-size", type=int, default=16, help="Pixels per cell in the PNG")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    generator = build_generator(args)
    layout = generator.generate(args.seed)

    print(render_ascii(layout))
    print()
    print(generate_text_report(layout, compute_layout_stats(layout)))

    if args.png:
        path = save_image(layout, Path(args.png), cell_size=args.cell_size)
        print(f"\nSaved preview to {path}")
    if args.json:
        json_path = Path(args.json)
        save_layout(layout, json_path)
        print(f"Saved snapshot to {json_path}")


if __name__ == "__main__":
    main()
