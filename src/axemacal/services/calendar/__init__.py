"""Calendar output."""
