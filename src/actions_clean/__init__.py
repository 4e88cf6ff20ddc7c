"""actions-clean: post-job cleanup for self-hosted CI runners."""

__version__ = "0.1.0"
