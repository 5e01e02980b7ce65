"""Patient vital-sign monitoring.

This package contains the domain models and the medical check service,
isolated from storage and alert transport for easy testing and reasoning.
"""
