"""Baseline regression models."""

from thresholds.models.baseline import BaselineFit

__all__ = ["BaselineFit"]
