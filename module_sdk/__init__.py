"""Scaffolding tools for construct library packages."""
