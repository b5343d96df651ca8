# scrubbing/core/__init__.py

"""Core domain models and utilities used across the scrubbing engine.

This package provides domain types, exceptions, and the built-in pattern
library loader shared by the rest of the application.
"""
