#!/usr/bin/env python3
"""Main CLI entry point for magpie-ibge

This allows running CLI commands via:
    python -m cli process_crop --help
    python -m cli process_all --help
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def main():
    """Main CLI dispatcher"""
    if len(sys.argv) < 2:
        print("Usage: python -m cli <command> [args...]")
        print("\nAvailable commands:")
        print("  process_crop         Map PAM planted area to MagPIE crops on the grid")
        print("  process_livestock    Map PPM cattle herds to the grid")
        print("  process_forestry     Map PEVS forestry production to wood, woodfuel and timber")
        print("  process_all          Run all three pipelines")
        print("\nFor help on a specific command:")
        print("  python -m cli <command> --help")
        sys.exit(1)

    command = sys.argv[1]
    # Remove the command from sys.argv so the subcommand can parse its own args
    sys.argv = [sys.argv[0]] + sys.argv[2:]

    if command == "process_crop":
        from cli.process_crop import main as process_crop_main

        process_crop_main()
    elif command == "process_livestock":
        from cli.process_livestock import main as process_livestock_main

        process_livestock_main()
    elif command == "process_forestry":
        from cli.process_forestry import main as process_forestry_main

        process_forestry_main()
    elif command == "process_all":
        from cli.process_all import main as process_all_main

        process_all_main()
    else:
        print(f"Unknown command: {command}")
        print(
            "Available commands: process_crop, process_livestock, process_forestry, process_all"
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
