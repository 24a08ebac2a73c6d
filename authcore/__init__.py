"""
authcore - authentication and role-based access control service.

Layers:
- domain: entities, value objects and the lockout policy (no I/O)
- application: use cases, DTOs and outbound ports
- infrastructure: settings, logging, security primitives and adapters
"""

__version__ = "0.1.0"
