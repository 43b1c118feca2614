"""Configuration defaults, schema and loader."""
