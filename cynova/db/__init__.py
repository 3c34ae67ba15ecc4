"""Database Declarations — declarative base and shared column mixins.

Invariants:
    - Every table model inherits from Base and TimestampMixin
"""
