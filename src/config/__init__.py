"""
Configuration loading and validation.

Provides strongly typed settings objects (local timezone, log level) loaded
from environment variables with upfront validation.
"""
