"""Warehouser Application Package - inventory items, warehouses and the links between them.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
