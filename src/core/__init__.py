"""Shared kernel: settings, Result, domain error data and the DI container.

Depends on nothing in domain, application or presentation except through
the container's lazy imports.
"""
