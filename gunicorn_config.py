"""
Gunicorn configuration for production deployment.

Usage:
    gunicorn -c gunicorn_config.py app:app
"""

import os
import multiprocessing


def get_env_int(var_name: str, default: int, min_value: int = 1, max_value: int = 1000) -> int:
    """Read an integer environment variable and check its range."""
    value = os.getenv(var_name)
    if value is None:
        return default
    try:
        int_value = int(value)
    except ValueError:
        raise ValueError(f"{var_name} must be a valid integer, got '{value}'")
    if int_value < min_value or int_value > max_value:
        raise ValueError(
            f"{var_name} must be between {min_value} and {max_value}, got {int_value}"
        )
    return int_value


def get_env_str(var_name: str, default: str, allowed_values: list = None) -> str:
    """Read a string environment variable, optionally restricted to allowed_values."""
    value = os.getenv(var_name, default)
    if allowed_values and value not in allowed_values:
        raise ValueError(
            f"{var_name} must be one of {allowed_values}, got '{value}'"
        )
    return value


# Server socket
bind = get_env_str('GUNICORN_BIND', '0.0.0.0:5000')

# Analysis and enhancement are CPU-bound and short, so sync workers suffice
workers = get_env_int('GUNICORN_WORKERS', multiprocessing.cpu_count() + 1, min_value=1, max_value=64)
worker_class = 'sync'
timeout = get_env_int('GUNICORN_TIMEOUT', 30, min_value=1, max_value=600)
graceful_timeout = 10
keepalive = 2

# Logging
accesslog = get_env_str('GUNICORN_ACCESS_LOG', '-')
errorlog = get_env_str('GUNICORN_ERROR_LOG', '-')
loglevel = get_env_str('GUNICORN_LOG_LEVEL', 'info', allowed_values=['debug', 'info', 'warning', 'error', 'critical'])

proc_name = 'uno'
preload_app = True
