"""
Core infrastructure: configuration, logging, exceptions.
"""
