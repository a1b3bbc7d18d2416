"""Infrastructure layer for correlog: adapters, observability, monitoring and stubs."""
