"""
utils/ - Shared helpers
=======================
Logging setup and the result values returned by repositories.
"""
