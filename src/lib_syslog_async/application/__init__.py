"""Application layer: ports, delivery use case, and the session controller."""
