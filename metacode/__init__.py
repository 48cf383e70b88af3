"""Metacode toolchain.

Provides CLI for regenerating table-driven macro output inside source files.
"""
