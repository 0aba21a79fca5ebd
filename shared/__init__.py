"""
Shared Kernel

Base classes, value objects, the error taxonomy and transaction helpers
shared by the spaces and reservations contexts.
"""
