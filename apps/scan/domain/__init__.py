"""Scan Domain Layer."""
