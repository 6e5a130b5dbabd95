"""
Validation Framework for UTM/UPS Grid Conversion.

This module provides consistency checks for the grid mapper and the
legacy DMA series used to cross-validate it.
"""

from validation.grid_checks import (
    GridConsistencyChecker,
    ValidationResult,
)

from validation.legacy_dma import (
    dma_geographic_to_tm,
    dma_tm_to_geographic,
    footpoint_latitude,
    meridian_arc,
)

__all__ = [
    "GridConsistencyChecker",
    "ValidationResult",
    "dma_geographic_to_tm",
    "dma_tm_to_geographic",
    "footpoint_latitude",
    "meridian_arc",
]
