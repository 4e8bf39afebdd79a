"""Run several independent pipelines, optionally in separate processes"""

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Type

from tqdm import tqdm

from magpie_ibge.processing.base.config import ProcessingConfig
from magpie_ibge.processing.base.processor import BaseProcessor
from magpie_ibge.processing.crop import CropConfig, CropProcessor
from magpie_ibge.processing.forestry import ForestryConfig, ForestryProcessor
from magpie_ibge.processing.livestock import LivestockConfig, LivestockProcessor

logger = logging.getLogger(__name__)

PROCESSORS: Dict[Type[ProcessingConfig], Type[BaseProcessor]] = {
    CropConfig: CropProcessor,
    LivestockConfig: LivestockProcessor,
    ForestryConfig: ForestryProcessor,
}


def run_pipeline(config: ProcessingConfig) -> List[Path]:
    """Validate and run the processor matching the config type"""
    processor_class = PROCESSORS.get(type(config))
    if processor_class is None:
        raise ValueError(f"No processor registered for {type(config).__name__}")
    return processor_class(config).process_with_validation()


def run_pipelines(configs: List[ProcessingConfig], workers: int = 1) -> List[Path]:
    """Run pipelines one after another, or across worker processes

    Pipelines share only read-only reference files. The first failure is
    raised once all submitted pipelines have finished.
    """
    if workers <= 0:
        raise ValueError(f"Workers must be positive, got {workers}")

    output_files: List[Path] = []
    if workers == 1:
        for config in tqdm(configs, desc="Pipelines"):
            output_files.extend(run_pipeline(config))
        return output_files

    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(run_pipeline, config): config for config in configs}
        for future in tqdm(as_completed(futures), total=len(futures), desc="Pipelines"):
            config = futures[future]
            files = future.result()
            logger.info(f"{config.survey.name} finished: {[str(f) for f in files]}")
            output_files.extend(files)

    return output_files
