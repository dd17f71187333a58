from prometheus_client import Counter, Histogram, start_http_server
from .config import settings
from .utils.logging import setup_logger

logger = setup_logger(__name__)

# Report metrics
reports_total = Counter(
    'tracker_reports_total',
    'Total number of reports generated',
    ['report', 'status']
)

report_errors_total = Counter(
    'tracker_report_errors_total',
    'Total number of rejected records by error kind',
    ['report', 'kind']
)

report_duration = Histogram(
    'tracker_report_duration_seconds',
    'Report generation duration in seconds',
    ['report']
)

# HTTP metrics
http_requests_total = Counter(
    'http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status']
)

def start_metrics_server():
    """Start the Prometheus metrics server."""
    try:
        start_http_server(settings.metrics_port)
        logger.info(f"Started Prometheus metrics server on port {settings.metrics_port}")
    except Exception as e:
        logger.error(f"Failed to start metrics server: {e}")
        raise
