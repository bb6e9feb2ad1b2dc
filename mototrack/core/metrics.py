from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
from prometheus_client.multiprocess import MultiProcessCollector
import os


registry = CollectorRegistry()
if os.getenv('prometheus_multiproc_dir'):
    MultiProcessCollector(registry)


http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0, 7.5, 10.0],
    registry=registry
)

http_errors_total = Counter(
    'http_errors_total',
    'Total HTTP errors',
    ['method', 'endpoint', 'status'],
    registry=registry
)

filter_queries_total = Counter(
    'filter_queries_total',
    'Total filtered page queries',
    ['entity'],
    registry=registry
)

filter_constraints = Histogram(
    'filter_constraints',
    'Number of constraints applied per filtered query',
    ['entity'],
    buckets=[0, 1, 2, 3, 4, 5, 6, 8, 10],
    registry=registry
)

cache_hits_total = Counter(
    'cache_hits_total',
    'Total cache hits',
    ['cache_type'],
    registry=registry
)

cache_misses_total = Counter(
    'cache_misses_total',
    'Total cache misses',
    ['cache_type'],
    registry=registry
)


def track_http_request(method: str, endpoint: str, status: int, duration: float):
    http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

    if status >= 400:
        http_errors_total.labels(method=method, endpoint=endpoint, status=status).inc()


def track_filter_query(entity: str, constraint_count: int):
    filter_queries_total.labels(entity=entity).inc()
    filter_constraints.labels(entity=entity).observe(constraint_count)


def track_cache_hit(cache_type: str):
    cache_hits_total.labels(cache_type=cache_type).inc()


def track_cache_miss(cache_type: str):
    cache_misses_total.labels(cache_type=cache_type).inc()


def render_metrics() -> bytes:
    return generate_latest(registry)
