"""Postercraft - AI poster generation from structured design parameters."""

__version__ = "1.0.0"
