"""Application wiring: dependency injection providers."""
