"""Ambient infrastructure: enums, errors, logging and configuration."""
