"""Connection profiles and settings resolution."""
