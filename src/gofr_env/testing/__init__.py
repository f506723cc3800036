"""Testing utilities for gofr-env users.

The fixtures need pytest (``pip install gofr-env[testing]``).

Load the fixtures as a pytest plugin:
    pytest_plugins = ["gofr_env.testing.pytest_fixtures"]
"""
