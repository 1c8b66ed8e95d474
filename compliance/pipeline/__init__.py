"""
Compliance pipeline: due-date classification and the demo seed dataset.
"""
from compliance.pipeline.due_dates import (
    DueDateBuckets,
    DueDateClassifier,
    anniversary_due_date,
    bucketize,
    effective_bucket,
)

__all__ = [
    "DueDateBuckets",
    "DueDateClassifier",
    "anniversary_due_date",
    "bucketize",
    "effective_bucket",
]
