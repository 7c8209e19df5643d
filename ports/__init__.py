from .documents import DocumentSourcePort
from .rows import RowSourcePort
from .sink import ApplicantSinkPort

__all__ = [
    "DocumentSourcePort",
    "RowSourcePort",
    "ApplicantSinkPort",
]
