from prometheus_client import CollectorRegistry, Counter

registry = CollectorRegistry()

PAGE_OUTCOMES = Counter(
    "footage_page_outcomes_total",
    "Footage detail page requests by outcome",
    ["outcome"],
    registry=registry,
)
