"""Role catalog storage adapters."""
