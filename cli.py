#!/usr/bin/env python3
"""
AMP CLI.

Command-line client for the AMP status service.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                                 # Show help
    python cli.py service                                # Status of http://localhost:32777
    python cli.py service --url http://example.com:9000  # Status of another service
    python cli.py service -u http://example.com:9000 -t 2.5
    python cli.py version                                # Show version

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from amp_cli.cli.main import app

if __name__ == "__main__":
    app()
