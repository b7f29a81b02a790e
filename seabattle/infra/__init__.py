"""Configuration, app-data paths, and logging setup."""
