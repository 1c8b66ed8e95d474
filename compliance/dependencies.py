from __future__ import annotations

from compliance.config import settings
from compliance.pipeline.due_dates import DueDateClassifier


def get_classifier() -> DueDateClassifier:
    return DueDateClassifier(anniversary_month=settings.ANNIVERSARY_MONTH)
