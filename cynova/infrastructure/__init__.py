"""Infrastructure Layer — database, hashing, rate limiting and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver-level failures are translated into core error types here
"""
