"""Structural patterns: assembling objects and classes into larger structures.

Modules are imported on demand by the pattern registry.
"""
