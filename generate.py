#!/usr/bin/env python3
"""Starforge - Command line entry point.

Generates a universe from a seed and settings, then prints summaries of it:
the universe and its neighborhood, the galaxies, and optionally the map
divisions, hex and star systems at a coordinate of one galaxy.
"""

import argparse
import logging
import sys
from typing import List, Optional

from starforge.engine import Generator, get_divisions_for_coord, get_hex
from starforge.models import GeneratedUniverse, GenerationSettings, SpaceCoordinates, load_settings
from starforge.utils import StarforgeError
from starforge.utils.serialization import load_universe, save_universe


def print_universe(generated: GeneratedUniverse):
    """Print the universe, its neighborhood and one line per galaxy."""
    print(generated.universe)
    print(generated.galactic_neighborhood)
    for galaxy in generated.galaxies:
        print(f"  #{galaxy.index} {galaxy}")


def print_coordinate(generated: GeneratedUniverse, galaxy_index: int, coord: SpaceCoordinates):
    """Print the divisions enclosing a coordinate, its hex and the systems in it."""
    galaxy = generated.galaxy(galaxy_index)
    print(f"\n{galaxy.name} #{galaxy.index} at {coord}")
    for division in get_divisions_for_coord(galaxy, coord):
        print(f"  {division}")
    hex_ = get_hex(galaxy, coord)
    print(f"  {hex_}")
    for system in hex_.contents:
        print(f"\n  {system}")
        for point in system.all_objects:
            print(f"    {point}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Starforge - Deterministic universe generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                      # Generate with the default seed
  %(prog)s --seed andromeda                     # Specific seed
  %(prog)s --settings settings.json             # Settings file (JSON)
  %(prog)s --galaxy 0 --coord 0 0 0             # Show the hex at the galactic center
  %(prog)s --save universe.json                 # Save the universe after generation
  %(prog)s --load universe.json --coord 5 2 0   # Explore a saved universe
        """,
    )
    parser.add_argument("--seed", type=str, default=None, help="Generation seed")
    parser.add_argument(
        "--settings", type=str, metavar="FILE", help="Load generation settings from a JSON file"
    )
    parser.add_argument(
        "--galaxy", type=int, default=0, help="Index of the galaxy to explore (default: 0)"
    )
    parser.add_argument(
        "--coord",
        type=int,
        nargs=3,
        metavar=("X", "Y", "Z"),
        help="Coordinates in parsecs from the galactic center to explore",
    )
    parser.add_argument("--load", type=str, metavar="FILE", help="Load a universe from JSON file")
    parser.add_argument(
        "--save", type=str, metavar="FILE", help="Save the universe to JSON file after exploring"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        if args.load:
            generated = load_universe(args.load)
            print(f"Universe loaded from {args.load}")
        else:
            if args.settings:
                settings = load_settings(args.settings, seed=args.seed)
            elif args.seed is not None:
                settings = GenerationSettings(seed=args.seed)
            else:
                settings = GenerationSettings()
            generated = Generator.generate(settings)

        print_universe(generated)
        if args.coord:
            print_coordinate(generated, args.galaxy, SpaceCoordinates(*args.coord))

        if args.save:
            save_universe(generated, args.save)
            print(f"\nUniverse saved to {args.save}")
    except FileNotFoundError as e:
        print(f"Error: File {e.filename} not found.")
        return 1
    except StarforgeError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
