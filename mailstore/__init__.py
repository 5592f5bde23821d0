"""Email lifecycle store with scheduled spam classification."""
