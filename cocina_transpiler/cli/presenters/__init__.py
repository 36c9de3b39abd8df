"""Presenters for CLI output formatting.

Presenters turn application results into rich tables and status lines.
"""

from .differences import DifferencesPresenter

__all__ = ["DifferencesPresenter"]
