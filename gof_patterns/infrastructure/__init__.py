"""Infrastructure layer - logging, error middleware and the pattern registry."""
