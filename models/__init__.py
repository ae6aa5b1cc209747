"""
models/ - Domain Models
=======================
Plain dataclasses for users, properties and reservations.
"""
