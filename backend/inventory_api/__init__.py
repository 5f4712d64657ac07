"""Inventory API package: stores, products and inventory reporting.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
