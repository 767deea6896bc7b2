"""Behavioral patterns: algorithms and the assignment of responsibilities between objects.

Modules are imported on demand by the pattern registry.
"""
