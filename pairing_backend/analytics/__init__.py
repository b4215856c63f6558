"""
Analytics package.

Responsibilities:
- Record one event per pairing request (dish, source, drinks, timing).
- Aggregate events into usage statistics for the admin endpoint.
"""
