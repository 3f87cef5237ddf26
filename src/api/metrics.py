from prometheus_client import Counter, Histogram, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        # already registered, reuse the existing collector
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "planner_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "planner_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

TASKS_SCHEDULED_TOTAL = get_or_create_metric(
    "planner_tasks_scheduled_total", "Total tasks placed by the scheduler", Counter
)

LOW_CONFIDENCE_PLACEMENTS_TOTAL = get_or_create_metric(
    "planner_low_confidence_placements_total",
    "Placements scheduled after their due date",
    Counter,
)
