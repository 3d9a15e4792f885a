"""
Historical trend analysis.

Fits a least-squares line through a parameter's recent history and
reports descriptive statistics.
"""

import logging
import statistics
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..core import constants, DateUtils
from ..models import (
    BoundingBox,
    Observation,
    ParameterKind,
    ParameterQuery,
    TrendDirection,
    TrendResult,
    TrendStatistics,
)
from ..processing.reducer import observation_scalar
from .data_provider import DataProvider


def least_squares_slope(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Ordinary least-squares slope of ys against xs.

    Fewer than two points, or points that all share one x, give a slope of 0.
    """
    try:
        return statistics.linear_regression(xs, ys).slope
    except statistics.StatisticsError:
        return 0.0


def slope_direction(slope: float) -> TrendDirection:
    if slope > constants.TREND_SLOPE_THRESHOLD:
        return TrendDirection.INCREASING
    if slope < -constants.TREND_SLOPE_THRESHOLD:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def trend_statistics(kind: ParameterKind, observations: Sequence[Observation]) -> TrendStatistics:
    """
    Statistics of a non-empty observation series.

    The slope is in value units per millisecond since the epoch.
    """
    values = [observation_scalar(kind, o) for o in observations]
    times = [DateUtils.to_epoch_millis(o.timestamp) for o in observations]
    slope = least_squares_slope(times, values)

    return TrendStatistics(
        min=min(values),
        max=max(values),
        average=statistics.fmean(values),
        trend=slope_direction(slope),
        slope=round(slope, constants.SLOPE_DECIMALS),
        data_points=len(values),
    )


class TrendAnalyzer:
    """Analyze a parameter's history over a trailing window."""

    def __init__(
        self,
        provider: DataProvider,
        default_bounding_box: Optional[BoundingBox] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize trend analyzer.

        Args:
            provider: Data provider
            default_bounding_box: Region analyzed
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.provider = provider
        self.bounding_box = default_bounding_box or BoundingBox(*constants.DEFAULT_BOUNDING_BOX)
        self.date_utils = DateUtils(self.logger)

    def analyze(
        self,
        kind: ParameterKind,
        days: int = constants.DEFAULT_TREND_DAYS,
        now: Optional[datetime] = None
    ) -> Optional[TrendResult]:
        """
        Analyze the trailing ``days`` of one parameter.

        Args:
            kind: Parameter kind
            days: Window length in days
            now: End of the window (defaults to the current UTC time)

        Returns:
            Trend result, or None if the provider returned an error or no data
        """
        start, end = self.date_utils.trailing_window(timedelta(days=days), now)
        self.logger.info(f"Analyzing {kind.value} trend over {days} days")

        response = self.provider.fetch(kind, ParameterQuery(start, end, self.bounding_box))
        if not response.has_data:
            if response.error:
                self.logger.warning(f"Trend analysis for {kind.value} failed: {response.error}")
            else:
                self.logger.warning(f"No {kind.value} data for trend analysis")
            return None

        stats = trend_statistics(kind, response.data)
        self.logger.debug(
            f"{kind.value}: slope={stats.slope} ({stats.trend.value}), {stats.data_points} points"
        )

        return TrendResult(
            kind=kind,
            time_range=(start, end),
            statistics=stats,
            data=response.data,
            metadata=response.metadata,
        )
