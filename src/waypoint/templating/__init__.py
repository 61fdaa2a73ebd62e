"""Template integration — route table and URL helpers for kida templates."""
