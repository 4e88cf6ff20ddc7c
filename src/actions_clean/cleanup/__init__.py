"""Cleanup of runner target roots."""

from actions_clean.cleanup.executor import clean_directory
from actions_clean.cleanup.orchestrator import CleanupOrchestrator
from actions_clean.cleanup.safety import check_containment, is_within

__all__ = [
    "CleanupOrchestrator",
    "check_containment",
    "clean_directory",
    "is_within",
]
