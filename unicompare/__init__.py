"""UniCompare - search, filter and compare universities."""
