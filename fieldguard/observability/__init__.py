"""
Logging and metrics for the validator engine.
"""
