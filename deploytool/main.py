#!/usr/bin/env python3
"""
Main entry point for the deploytool application.
"""
from .cli.deploy_cli import cli


def main():
    """Run the command line interface."""
    cli()


if __name__ == "__main__":
    main()
