"""Cross-cutting infrastructure: clock abstraction and observability."""
