"""Goal engine application layer."""
