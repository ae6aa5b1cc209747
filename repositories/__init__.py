"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive a ConnectionProvider, run parameterized SQL through it,
and return Success / NotFound / Failure results wrapping domain model objects.
"""
