"""Core configuration, extensions, logging, errors and security helpers."""
