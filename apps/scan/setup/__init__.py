"""Scan service setup (config, logging, database, DI)."""
