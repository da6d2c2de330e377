# utils/__init__.py

"""
Utility functions: geometry, validation and dependency injection.
"""
