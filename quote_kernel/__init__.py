"""
Quote Kernel

Foundational layer for the quote-item pricing system:
- Exact decimal arithmetic primitives (never binary float)
- Immutable pricing input/output value objects
- Typed exception hierarchy with machine-readable codes
- Structured JSON logging with request-scoped context
"""

__version__ = "0.1.0"
