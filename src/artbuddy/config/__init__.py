"""Configuration — artbuddy.toml discovery, settings, and logging setup."""
