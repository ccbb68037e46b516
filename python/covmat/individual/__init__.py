"""Single-column statistics."""
