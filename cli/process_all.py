#!/usr/bin/env python3
"""Run the crop, livestock and forestry pipelines in one go"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.base_process_cli import base_config_kwargs, create_base_process_parser, setup_logging
from magpie_ibge.constants import DEFAULT_WORKERS
from magpie_ibge.mapping.models import DEFAULT_HERD_CATEGORIES
from magpie_ibge.processing.crop import CropConfig
from magpie_ibge.processing.forestry import ForestryConfig
from magpie_ibge.processing.livestock import LivestockConfig
from magpie_ibge.processing.runner import run_pipelines


def main(argv=None):
    """Main function to run every pipeline"""
    parser = create_base_process_parser(
        "Map IBGE PAM, PPM and PEVS tables to the MagPIE grid"
    )
    parser.add_argument("--crop-input", type=Path, help="PAM planted area fact table")
    parser.add_argument("--livestock-input", type=Path, help="PPM herd fact table")
    parser.add_argument("--forestry-input", type=Path, help="PEVS production fact table")
    parser.add_argument(
        "--crop-mapping",
        type=Path,
        help="IBGE → MagPIE crop table (default: <data-dir>/mapping_crops.csv)",
    )
    parser.add_argument(
        "--herd",
        nargs="+",
        default=list(DEFAULT_HERD_CATEGORIES),
        help=f"IBGE herd categories to keep (default: {' '.join(DEFAULT_HERD_CATEGORIES)})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Number of worker processes (default: {DEFAULT_WORKERS})",
    )
    args = parser.parse_args(argv)

    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    try:
        shared = base_config_kwargs(args)
        configs = [
            CropConfig(
                fact_file=args.crop_input, crop_mapping_file=args.crop_mapping, **shared
            ),
            LivestockConfig(
                fact_file=args.livestock_input, herd_categories=tuple(args.herd), **shared
            ),
            ForestryConfig(fact_file=args.forestry_input, **shared),
        ]

        output_files = run_pipelines(configs, workers=args.workers)

        logger.info("All pipelines completed successfully!")
        logger.info(f"Generated {len(output_files)} output files:")
        for file_path in output_files:
            logger.info(f"  {file_path}")

    except Exception as e:
        logger.error(f"Processing failed: {e}")
        if args.debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
