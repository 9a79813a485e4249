"""Output layer — plain text, JSON, and Rich tables."""
