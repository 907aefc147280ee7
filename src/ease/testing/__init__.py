"""Testing support – pytest fixtures for builder-based suites.

The fixtures in :mod:`ease.testing.fixtures` are registered automatically
through the ``pytest11`` entry point once the package is installed.
"""
