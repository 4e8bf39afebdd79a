#!/usr/bin/env python3
"""Map PEVS forestry production onto the MagPIE grid"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.base_process_cli import run_processor_cli
from magpie_ibge.processing.forestry.config import ForestryConfig
from magpie_ibge.processing.forestry.processor import ForestryProcessor


def main(argv=None):
    """Main function to process PEVS forestry production"""
    run_processor_cli(
        description="Map IBGE PEVS forestry production to MagPIE wood, woodfuel and timber",
        config_class=ForestryConfig,
        processor_class=ForestryProcessor,
        success_message="Forestry processing completed successfully!",
        argv=argv,
    )


if __name__ == "__main__":
    main()
