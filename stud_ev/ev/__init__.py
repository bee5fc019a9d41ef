"""Final-card enumeration and reporting."""
