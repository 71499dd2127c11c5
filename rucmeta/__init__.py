"""Catalog metadata, DDL management, result printing and transaction bookkeeping for a small database engine."""

__version__ = "0.1.0"