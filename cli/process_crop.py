#!/usr/bin/env python3
"""Map PAM planted area onto the MagPIE grid by MagPIE crop"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.base_process_cli import run_processor_cli
from magpie_ibge.processing.crop.config import CropConfig
from magpie_ibge.processing.crop.processor import CropProcessor


def add_crop_arguments(parser):
    """Add crop-specific arguments"""
    parser.add_argument(
        "--crop-mapping",
        type=Path,
        help="IBGE → MagPIE crop table (default: <data-dir>/mapping_crops.csv)",
    )
    parser.add_argument(
        "--unit-correction",
        action="store_true",
        help="Zero fruit production reported in fruit counts (production tables only)",
    )


def parse_crop_arguments(args):
    """Parse crop-specific arguments and return config kwargs"""
    return {
        "crop_mapping_file": args.crop_mapping,
        "apply_unit_correction": args.unit_correction,
    }


def main(argv=None):
    """Main function to process PAM planted area"""
    run_processor_cli(
        description="Map IBGE PAM planted area to MagPIE crops on the grid",
        config_class=CropConfig,
        processor_class=CropProcessor,
        add_custom_args_func=add_crop_arguments,
        parse_custom_args_func=parse_crop_arguments,
        success_message="Crop processing completed successfully!",
        argv=argv,
    )


if __name__ == "__main__":
    main()
