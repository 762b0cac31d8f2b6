"""Classify Application Layer."""
