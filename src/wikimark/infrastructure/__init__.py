"""Infrastructure adapters: parsing and input sources."""
