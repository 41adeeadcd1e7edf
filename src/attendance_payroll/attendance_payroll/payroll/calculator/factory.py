from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core.enums import ExcuseResolution, ExcuseStatus
from .base import DeductionStrategy
from .hourly_strategy import HourlyDeductionStrategy
from .tiered_strategy import TieredDeductionStrategy
from .waived_strategy import WaivedDeductionStrategy


@dataclass
class DeductionStrategyFactory:
    """Factory Pattern: choose the deduction rule from the excuse disposition."""

    def for_excuse(self, *, excuse_status: ExcuseStatus, resolution: Optional[ExcuseResolution]) -> DeductionStrategy:
        if excuse_status != ExcuseStatus.ACCEPTED:
            # A pending excuse is charged provisionally; adjudication corrects it.
            return TieredDeductionStrategy()
        if resolution == ExcuseResolution.NO_DEDUCT:
            return WaivedDeductionStrategy()
        return HourlyDeductionStrategy()
