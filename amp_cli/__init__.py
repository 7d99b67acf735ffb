"""
AMP command-line client.

Thin CLI for querying the status of a remote AMP service.
"""
