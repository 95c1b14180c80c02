"""Bus feedback service."""
