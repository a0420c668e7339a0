"""
Persistence adapters.

Services depend on the repository instead of opening SQLAlchemy sessions
themselves. Each call checks a connection out of the pool and returns it
before the call completes.
"""
