"""Floodwatch: DMC flood report ingestion and normalization."""

__version__ = "0.1.0"
