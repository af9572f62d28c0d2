"""
Observability - Prometheus metrics for the marketplace core.
"""
