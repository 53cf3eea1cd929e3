"""HTTP client, transport setup, and request execution."""
