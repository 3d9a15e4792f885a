"""
Main entry point for the coastal monitoring system.

Wires the configured provider into the analysis services and exposes
them as CLI commands printing JSON.
"""

import argparse
import json
import random
import sys
from datetime import timedelta
from typing import Any, List, Optional

from .core import Config, setup_logger, LoggerContext, UnknownDatasetError
from .api import OceanDataAPI
from .models import BoundingBox, ParameterKind, to_jsonable
from .processing import OceanographicAggregator, ThreatAssessor
from .services import (
    CoastalMonitor,
    DataProvider,
    DatasetRegistry,
    FallbackGenerator,
    HttpDataProvider,
    ParameterForecaster,
    PredictionTimeline,
    SyntheticDataProvider,
    TrendAnalyzer,
)


class CoastalMonitorApp:
    """Main application for coastal monitoring."""

    def __init__(self, config_file: Optional[str] = None, config: Optional[Config] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            config: Ready configuration (takes precedence over config_file)
        """
        self.config = config or Config(config_file)

        self.logger = setup_logger(log_level=self.config.log_level)
        self.logger.debug(f"Configuration: {self.config}")

        self.rng = random.Random(self.config.random_seed)
        self.bounding_box = BoundingBox.from_sequence(self.config.bounding_box)
        self.api_client: Optional[OceanDataAPI] = None

        self.registry = DatasetRegistry.default(logger=self.logger)
        self.provider = self._create_provider()
        self.aggregator = OceanographicAggregator(
            provider=self.provider,
            default_bounding_box=self.bounding_box,
            max_workers=self.config.max_workers,
            logger=self.logger
        )
        self.assessor = ThreatAssessor(logger=self.logger)
        self.trend_analyzer = TrendAnalyzer(
            provider=self.provider,
            default_bounding_box=self.bounding_box,
            logger=self.logger
        )
        self.fallback = FallbackGenerator(rng=self.rng)
        self.timeline = PredictionTimeline(rng=self.rng, logger=self.logger)
        self.forecaster = ParameterForecaster(logger=self.logger)

    def _create_provider(self) -> DataProvider:
        if self.config.provider_type == "http":
            self.logger.info(f"Using HTTP provider at {self.config.api_base_url}")
            self.api_client = OceanDataAPI(
                base_url=self.config.api_base_url,
                timeout=self.config.api_timeout,
                max_retries=self.config.api_max_retries,
                verify_ssl=self.config.api_verify_ssl,
                logger=self.logger
            )
            return HttpDataProvider(self.api_client, self.registry, self.logger)

        self.logger.info("Using synthetic provider")
        return SyntheticDataProvider(self.registry, self.rng, self.logger)

    @property
    def summary_window(self) -> timedelta:
        return timedelta(hours=self.config.summary_window_hours)

    def summary(self, bounding_box: Optional[BoundingBox] = None) -> Optional[dict]:
        region = (bounding_box or self.bounding_box).as_tuple()
        with LoggerContext(self.logger, "oceanographic summary", region=region):
            result = self.aggregator.summarize(bounding_box, self.summary_window)
        return result.to_dict() if result else None

    def threat(self, bounding_box: Optional[BoundingBox] = None) -> Optional[dict]:
        region = (bounding_box or self.bounding_box).as_tuple()
        with LoggerContext(self.logger, "threat assessment", region=region):
            summary = self.aggregator.summarize(bounding_box, self.summary_window)
            assessment = self.assessor.assess(summary)
        return assessment.to_dict() if assessment else None

    def snapshot(self, bounding_box: Optional[BoundingBox] = None) -> dict:
        """Live summary, or fallback values if it misses the timeout."""
        monitor = CoastalMonitor(
            aggregator=self.aggregator,
            fallback=self.fallback,
            assessor=self.assessor,
            timeout=self.config.fallback_timeout,
            logger=self.logger
        )
        with monitor:
            result = monitor.snapshot(bounding_box)
        return result.to_dict()

    def trend(
        self,
        kind: ParameterKind,
        days: Optional[int] = None,
        include_data: bool = False
    ) -> Optional[dict]:
        days = days or self.config.trend_days
        with LoggerContext(self.logger, "trend analysis", parameter=kind.value, days=days):
            result = self.trend_analyzer.analyze(kind, days)
        return result.to_dict(include_data=include_data) if result else None

    def fallback_values(self, kind: Optional[ParameterKind] = None) -> dict:
        if kind:
            return self.fallback.generate(kind).to_dict()
        return to_jsonable(self.fallback.generate_all())

    def timeline_points(self, kind: ParameterKind, days: int) -> List[dict]:
        summary = self.aggregator.summarize(None, self.summary_window)
        return [point.to_dict() for point in self.timeline.generate(kind, days, summary)]

    def forecast(self, kind: Optional[ParameterKind] = None) -> Optional[Any]:
        """Short-range forecast of one parameter, or of all five."""
        summary = self.aggregator.summarize(None, self.summary_window)
        if kind:
            result = self.forecaster.generate(kind, summary)
            return result.to_dict() if result else None
        forecasts = self.forecaster.generate_all(summary)
        return [forecast.to_dict() for forecast in forecasts] if forecasts else None

    def datasets(self, kind: Optional[ParameterKind] = None) -> List[dict]:
        descriptors = self.registry.for_kind(kind) if kind else self.registry.list()
        return [descriptor.to_dict() for descriptor in descriptors]

    def dataset_details(self, dataset_id: str) -> dict:
        """
        Descriptor, quality metrics and temporal coverage of one dataset.

        Raises:
            UnknownDatasetError: If the id is not in the registry
        """
        descriptor = self.registry.require(dataset_id)
        return {
            **descriptor.to_dict(),
            "quality": to_jsonable(self.registry.quality_metrics(dataset_id)),
            "coverage": to_jsonable(self.registry.temporal_coverage(dataset_id)),
        }

    def close(self) -> None:
        if self.api_client:
            self.api_client.close()


def _parameter(value: str) -> ParameterKind:
    """argparse type for parameter names."""
    try:
        return ParameterKind.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _bounding_box(value: str) -> BoundingBox:
    """argparse type for 'min_lat,min_lon,max_lat,max_lon'."""
    try:
        return BoundingBox.from_sequence([float(v) for v in value.split(",")])
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser():
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="coastal-monitor",
        description="Coastal oceanographic summary and threat assessment"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("summary", "Current oceanographic summary"),
        ("threat", "Current threat assessment"),
        ("snapshot", "Live summary, or fallback values on timeout"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--bbox",
            type=_bounding_box,
            default=None,
            help="Bounding box min_lat,min_lon,max_lat,max_lon"
        )

    trend = subparsers.add_parser("trend", help="Historical trend of one parameter")
    trend.add_argument("parameter", type=_parameter)
    trend.add_argument("--days", type=int, default=None, help="Window length in days")
    trend.add_argument("--include-data", action="store_true", help="Include raw observations")

    fallback = subparsers.add_parser("fallback", help="Fallback parameter values")
    fallback.add_argument("parameter", type=_parameter, nargs="?", default=None)

    timeline = subparsers.add_parser("timeline", help="Prediction timeline of one parameter")
    timeline.add_argument("parameter", type=_parameter)
    timeline.add_argument("--days", type=int, choices=(7, 14, 30), default=7)

    forecast = subparsers.add_parser("forecast", help="Short-range forecast from the current summary")
    forecast.add_argument("parameter", type=_parameter, nargs="?", default=None)

    datasets = subparsers.add_parser("datasets", help="Dataset catalog")
    datasets.add_argument("--parameter", type=_parameter, default=None)
    datasets.add_argument("--id", dest="dataset_id", default=None, help="Show one dataset in detail")

    return parser


def run_command(app: CoastalMonitorApp, args) -> Any:
    """Dispatch a parsed command to the application."""
    if args.command == "summary":
        return app.summary(args.bbox)
    if args.command == "threat":
        return app.threat(args.bbox)
    if args.command == "snapshot":
        return app.snapshot(args.bbox)
    if args.command == "trend":
        return app.trend(args.parameter, args.days, args.include_data)
    if args.command == "fallback":
        return app.fallback_values(args.parameter)
    if args.command == "timeline":
        return app.timeline_points(args.parameter, args.days)
    if args.command == "forecast":
        return app.forecast(args.parameter)
    if args.command == "datasets":
        if args.dataset_id:
            return app.dataset_details(args.dataset_id)
        return app.datasets(args.parameter)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app = CoastalMonitorApp(config_file=args.config)
    except (ValueError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = run_command(app, args)
    except UnknownDatasetError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        app.logger.error(f"Application error: {e}", exc_info=True)
        print(f"Application failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        app.close()

    if result is None:
        print("No data available", file=sys.stderr)
        sys.exit(2)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
