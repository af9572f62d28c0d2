"""
Prometheus Metrics Endpoint.

Exposes everything recorded in marketchat/observability/metrics.py in the
Prometheus text format. Test with: curl http://localhost:8080/metrics
"""

from fastapi import APIRouter, Response
from marketchat.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Prometheus metrics endpoint (scraped, not called by clients)."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
