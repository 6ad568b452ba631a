"""Application services module.

Pure mapping logic shared by the use cases; no I/O.
"""
from linehook.application.services.record_mapper import DEFAULT_BUILDERS, RecordMapper

__all__ = [
    "DEFAULT_BUILDERS",
    "RecordMapper",
]
