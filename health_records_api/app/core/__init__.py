"""Configuration, logging, persistence and record lifecycle."""
