"""Static constants for casktoken."""
