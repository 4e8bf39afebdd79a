#!/usr/bin/env python3
"""Map PPM herd counts onto the MagPIE grid"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.base_process_cli import run_processor_cli
from magpie_ibge.mapping.models import DEFAULT_HERD_CATEGORIES
from magpie_ibge.processing.livestock.config import LivestockConfig
from magpie_ibge.processing.livestock.processor import LivestockProcessor


def add_livestock_arguments(parser):
    """Add livestock-specific arguments"""
    parser.add_argument(
        "--herd",
        nargs="+",
        default=list(DEFAULT_HERD_CATEGORIES),
        help=f"IBGE herd categories to keep (default: {' '.join(DEFAULT_HERD_CATEGORIES)})",
    )


def parse_livestock_arguments(args):
    """Parse livestock-specific arguments and return config kwargs"""
    return {"herd_categories": tuple(args.herd)}


def main(argv=None):
    """Main function to process PPM herd counts"""
    run_processor_cli(
        description="Map IBGE PPM herd counts to the MagPIE grid",
        config_class=LivestockConfig,
        processor_class=LivestockProcessor,
        add_custom_args_func=add_livestock_arguments,
        parse_custom_args_func=parse_livestock_arguments,
        success_message="Livestock processing completed successfully!",
        argv=argv,
    )


if __name__ == "__main__":
    main()
