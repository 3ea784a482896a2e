"""Command line interface for numstrkit."""
