"""Output rendering: Rich tables, JSON, YAML and CSV."""
