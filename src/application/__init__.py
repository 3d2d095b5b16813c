"""Application layer: ports, state container, and use cases."""
