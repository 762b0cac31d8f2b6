"""Facility Application Layer."""
