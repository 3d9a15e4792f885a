"""
Exception hierarchy for the coastal monitoring engine.
"""


class CoastalMonitorError(Exception):
    """Base class for all engine errors."""


class UnknownDatasetError(CoastalMonitorError, KeyError):
    """Requested dataset id is not in the registry."""

    def __init__(self, dataset_id: str):
        self.dataset_id = dataset_id
        super().__init__(f"Dataset {dataset_id} not found")

    def __str__(self) -> str:
        return f"Dataset {self.dataset_id} not found"


class NoDataError(CoastalMonitorError):
    """A parameter series contained no observations."""

    def __init__(self, kind: str, message: str = ""):
        self.kind = kind
        super().__init__(message or f"No {kind} observations available")


class ProviderError(CoastalMonitorError):
    """Internal provider failure; turned into an error response by fetch()."""
