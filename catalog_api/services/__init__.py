"""Service Layer — input validation and domain rules over repository contracts.

Invariants:
    - Validation happens before any repository call
    - Services depend on core Protocols, never on a concrete backend
"""
