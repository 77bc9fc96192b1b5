"""
BookQL - a single typed book lookup served over GraphQL, plus a client
that issues it asynchronously and reports a Pending/Failed/Succeeded
lifecycle to a presentation layer.
"""

__version__ = "1.0.0"
