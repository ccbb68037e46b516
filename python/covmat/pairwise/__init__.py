"""Two-sample statistics."""
