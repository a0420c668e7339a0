"""
High-level use cases for the loyalty API.

Each service module orchestrates the repository to implement the account and
card flows. Routers call these services instead of opening database sessions
or decoding cookies directly.
"""
