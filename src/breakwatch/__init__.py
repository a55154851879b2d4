"""Breakwatch — breaking-event scanner for prediction markets."""

__version__ = "0.1.0"
