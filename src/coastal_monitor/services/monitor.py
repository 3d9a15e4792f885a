"""
Live-or-fallback summary resolution.

Races the live aggregation against a bounded wait and serves fallback
summaries when the live result is late.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..core import constants, DateUtils
from ..models import (
    BoundingBox,
    OceanographicSummary,
    ParameterKind,
    ParameterSummary,
    ThreatAssessment,
    to_jsonable,
)
from ..processing import OceanographicAggregator, ThreatAssessor
from .fallback import FallbackGenerator


@dataclass
class MonitorSnapshot:
    """
    Result of one resolution.

    ``summary`` is the live summary when it arrived in time. On timeout,
    ``parameters`` holds fallback summaries and ``pending`` is the still
    running aggregation, whose result can be collected later.
    """

    timestamp: datetime
    parameters: Dict[ParameterKind, ParameterSummary]
    summary: Optional[OceanographicSummary] = None
    threat: Optional[ThreatAssessment] = None
    is_fallback: bool = False
    pending: Optional["Future[Optional[OceanographicSummary]]"] = field(default=None, repr=False)

    @property
    def is_live(self) -> bool:
        return self.summary is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "isFallback": self.is_fallback,
            "parameters": to_jsonable(self.parameters),
            "summary": self.summary.to_dict() if self.summary else None,
            "threat": self.threat.to_dict() if self.threat else None,
        }


class CoastalMonitor:
    """Serve the current summary, falling back when the live one is late."""

    def __init__(
        self,
        aggregator: OceanographicAggregator,
        fallback: Optional[FallbackGenerator] = None,
        assessor: Optional[ThreatAssessor] = None,
        timeout: float = constants.DEFAULT_FALLBACK_TIMEOUT,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize monitor.

        Args:
            aggregator: Live summary aggregator
            fallback: Fallback generator
            assessor: Threat assessor applied to live summaries
            timeout: Seconds to wait for the live summary
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.aggregator = aggregator
        self.fallback = fallback or FallbackGenerator()
        self.assessor = assessor or ThreatAssessor(self.logger)
        self.timeout = timeout
        self._executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="coastal-monitor")

    def snapshot(
        self,
        bounding_box: Optional[BoundingBox] = None,
        now: Optional[datetime] = None,
        timeout: Optional[float] = None
    ) -> MonitorSnapshot:
        """
        Resolve the current summary.

        Args:
            bounding_box: Region (defaults to the aggregator's default box)
            now: End of the summary window
            timeout: Seconds to wait (defaults to the configured timeout)

        Returns:
            Live snapshot, or a fallback snapshot if the live summary is late.
            A live aggregation that completes without data yields a snapshot
            with no summary and no parameters.
        """
        wait = self.timeout if timeout is None else timeout
        future = self._executor.submit(self.aggregator.summarize, bounding_box, None, now)

        try:
            summary = future.result(timeout=wait)
        except FutureTimeoutError:
            self.logger.info(f"Showing fallback data after {wait}s timeout")
            return MonitorSnapshot(
                timestamp=DateUtils.now_utc(),
                parameters=self.fallback.generate_all(),
                is_fallback=True,
                pending=future,
            )

        if summary is None:
            self.logger.warning("Live summary unavailable")
            return MonitorSnapshot(timestamp=DateUtils.now_utc(), parameters={})

        return MonitorSnapshot(
            timestamp=summary.timestamp,
            parameters=dict(summary.parameters),
            summary=summary,
            threat=self.assessor.assess(summary),
        )

    def close(self) -> None:
        """Release the worker threads without waiting for pending work."""
        self._executor.shutdown(wait=False)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
