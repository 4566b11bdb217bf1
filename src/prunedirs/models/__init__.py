"""prunedirs data models."""

from prunedirs.models.delete_result import DeleteResult
from prunedirs.models.options import RunOptions
from prunedirs.models.scan_result import MatchEntry, ScanResult, SizeReport

__all__ = [
    "DeleteResult",
    "MatchEntry",
    "RunOptions",
    "ScanResult",
    "SizeReport",
]
