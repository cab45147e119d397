"""
Prometheus metrics configuration
"""
import os

from prometheus_client import (CONTENT_TYPE_LATEST, CollectorRegistry, Counter,
                               Histogram, generate_latest)
from prometheus_client.multiprocess import MultiProcessCollector
from prometheus_client.registry import REGISTRY

# ============================================================================
# HTTP Request Metrics
# ============================================================================

http_requests_total = Counter(
    'http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint', 'status_code'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)
)

http_errors_total = Counter(
    'http_errors_total',
    'Total number of HTTP errors',
    ['method', 'endpoint', 'status_code', 'error_type']
)

# ============================================================================
# Database Metrics
# ============================================================================

db_queries_total = Counter(
    'db_queries_total',
    'Total number of database queries',
    ['operation']
)

db_query_duration_seconds = Histogram(
    'db_query_duration_seconds',
    'Database query duration in seconds',
    ['operation'],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0)
)

# ============================================================================
# Record Lifecycle Metrics
# ============================================================================

records_created_total = Counter(
    'records_created_total',
    'Total number of records created',
    ['entity']  # entity: 'professional', 'contact'
)

validation_failures_total = Counter(
    'validation_failures_total',
    'Total number of mutations rejected by validation',
    ['entity']
)

professionals_soft_deleted_total = Counter(
    'professionals_soft_deleted_total',
    'Total number of professionals marked as deleted'
)

contacts_cascaded_total = Counter(
    'contacts_cascaded_total',
    'Total number of contacts flagged by a professional deletion cascade'
)

contacts_hard_deleted_total = Counter(
    'contacts_hard_deleted_total',
    'Total number of contacts physically removed'
)


def get_metrics() -> bytes:
    """Render all metrics in Prometheus text format"""
    if os.environ.get('PROMETHEUS_MULTIPROC_DIR'):
        registry = CollectorRegistry()
        MultiProcessCollector(registry)
        return generate_latest(registry)
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Content type of the metrics payload"""
    return CONTENT_TYPE_LATEST
