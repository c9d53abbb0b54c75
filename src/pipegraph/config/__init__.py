"""Configuration: settings sources, pipegraph.toml tables, logging setup."""
