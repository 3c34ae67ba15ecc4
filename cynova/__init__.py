"""Cynova Catalog API — products, ingredients, blog posts and users.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
