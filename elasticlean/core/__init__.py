"""Core engine: parsing, age filtering, retention and orchestration."""
