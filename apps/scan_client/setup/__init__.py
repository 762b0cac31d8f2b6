"""Scan client setup."""
