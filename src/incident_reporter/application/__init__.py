"""Application layer: use cases, request handlers and error translation."""
