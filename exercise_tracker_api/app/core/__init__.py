"""Configuration, logging, error handling and persistence."""
