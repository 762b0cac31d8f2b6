"""Progress Application Layer."""
