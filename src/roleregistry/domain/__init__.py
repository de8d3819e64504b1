"""Domain layer - entities and exceptions."""
