"""Application layer: ports, the filter registry, and use cases."""
