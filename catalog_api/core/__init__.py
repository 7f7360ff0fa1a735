"""Core Domain — entities, rules, errors and repository contracts.

Invariants:
    - Core never imports from api/, services/ or infrastructure/
    - Entities are plain dataclasses with no IO

Design Decisions:
    - Dependency arrows point inward: shell implements the Protocols defined here
"""
