"""Settings package for the property service.

The `base.py` module contains configuration shared across environments.
The `dev.py`, `prod.py` and `test.py` modules extend base settings with
environment specific overrides.
"""
