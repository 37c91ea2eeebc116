"""
Generic utility functions shared across modules.

Currently holds the logging setup.
"""
