"""Readers for package.json and the multi-package config files."""
