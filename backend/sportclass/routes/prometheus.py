# backend/sportclass/routes/prometheus.py
"""
Prometheus metrics endpoint.

Exposes the metrics collected by the @measure_operation decorators, the
booking lock and the rejection counters.
"""

from fastapi import APIRouter, Response

from ..monitoring.prometheus_metrics import prometheus_metrics

router = APIRouter(tags=["monitoring"])


@router.get("/metrics", include_in_schema=False)
def get_metrics() -> Response:
    return Response(
        content=prometheus_metrics.get_metrics(),
        media_type=prometheus_metrics.get_content_type(),
    )
