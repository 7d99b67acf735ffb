"""
CLI Module.

Command-line client built with Typer for querying AMP services.

Architecture:
- CLI is a thin presentation layer
- Remote calls go through amp_cli.client (httpx)
- Command output goes to stdout, diagnostics and logs to stderr

Usage:
    amp --help
    amp service
    amp service --url http://example.com:9000
    amp version
"""
