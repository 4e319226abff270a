#!/usr/bin/env python3
"""
Main CLI for fontident
======================

Thin entry point for running the command line without installing the package.
"""

from fontident.cli import cli

if __name__ == "__main__":
    cli()
