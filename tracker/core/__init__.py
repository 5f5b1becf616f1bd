"""
Core utilities shared across the habit tracker.

This package hosts:
- configuration helpers (env vars, storage paths, backend selection)
- cross-cutting services such as logging and the diagnostic hook
- CSRF helpers for the HTML forms

Services and repositories depend on these primitives instead of reading
os.environ or configuring logging themselves.
"""
