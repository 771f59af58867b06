"""
Metrics API Router - exposes conversion and latency metrics.

Counters and histograms are defined in observability/metrics.py; this router
only renders the default registry in Prometheus text format.

    curl http://localhost:8080/metrics
"""

from fastapi import APIRouter, Response
from temperature_api.observability import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("", include_in_schema=False)
async def metrics():
    """Prometheus scrape target."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
