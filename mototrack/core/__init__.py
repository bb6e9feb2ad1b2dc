"""Cross-cutting infrastructure: errors, logging, metrics, caching, pagination."""
