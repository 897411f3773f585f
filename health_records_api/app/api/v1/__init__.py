"""Version 1 of the Health Records API."""
