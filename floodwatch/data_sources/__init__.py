"""Data sources module."""

from floodwatch.data_sources.dmc_client import DMCClient, blocks_path

__all__ = ["DMCClient", "blocks_path"]
