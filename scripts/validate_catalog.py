#!/usr/bin/env python3
"""Validate the location catalog and print its tagging and quality summary.

Usage:
    python scripts/validate_catalog.py [path/to/catalog.json]

Without a path, CATALOG__SEED_PATH is used, or the bundled Vienna catalog.
Exits with status 1 when any location has tagging errors.
"""

import argparse
import sys
from pathlib import Path

import logfire

from explora.config import Settings
from explora.domain.registry import VIENNA_TAXONOMY
from explora.domain.service import (
    CategoryService,
    PerformanceService,
    QualityService,
    TagValidationService,
)
from explora.persistence.catalog import load_catalog
from explora.util.logging import get_logger, setup_logging
from explora.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    """Validate the catalog and log the report."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", nargs="?", type=Path, help="JSON catalog file")
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    validation_service = TagValidationService(VIENNA_TAXONOMY, settings.tagging)
    quality_service = QualityService(
        validation_service=validation_service,
        category_service=CategoryService(
            VIENNA_TAXONOMY, settings.quality.diversity_saturation
        ),
        performance_service=PerformanceService(settings.performance),
        settings=settings.quality,
    )

    try:
        locations = load_catalog(args.path or settings.catalog.seed_path)
    except Exception as e:
        logfire.error(
            "Catalog validation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    catalog = validation_service.validate_catalog(locations)
    for analysis in catalog.results:
        status = "OK" if analysis.validation.is_valid else "ERROR"
        logger.info(
            "[%s] %s: %d visible / %d total tags",
            status,
            analysis.name,
            analysis.stats.total_visible,
            analysis.stats.total_tags,
        )
        for error in analysis.validation.errors:
            logger.error("    %s", error)
        for warning in analysis.validation.warnings:
            logger.warning("    %s", warning)

    report = quality_service.build_report(locations)
    logger.info(
        "%d locations, %d valid, %d meet the 3+ visible tag rule, average quality %d, "
        "%d cross-category",
        report.total_locations,
        report.valid_locations,
        catalog.meets_three_plus_rule,
        report.average_quality,
        report.cross_category_locations,
    )
    for concern in (
        report.performance_analysis.indexing_concerns
        + report.performance_analysis.query_concerns
        + report.performance_analysis.scalability_concerns
    ):
        logger.warning("Performance: %s", concern)

    return 1 if catalog.with_errors else 0


if __name__ == "__main__":
    sys.exit(main())
