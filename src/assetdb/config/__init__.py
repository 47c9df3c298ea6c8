"""Configuration: TOML settings, path discovery and the project layout."""
