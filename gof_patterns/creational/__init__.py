"""Creational patterns: mechanisms for creating objects flexibly.

Modules are imported on demand by the pattern registry.
"""
