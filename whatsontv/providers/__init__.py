"""Schedule data providers."""
