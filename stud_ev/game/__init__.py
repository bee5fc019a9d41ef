"""Cards, outcome categories and hand classification."""
