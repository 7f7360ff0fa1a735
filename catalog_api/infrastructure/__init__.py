"""Infrastructure Layer — storage backends, notification sender, logging.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - Storage failures surface as core errors, never raw driver exceptions
"""
