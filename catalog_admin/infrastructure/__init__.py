"""Infrastructure: configuration, logging and the in-memory store."""
