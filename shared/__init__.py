"""Shared foundation for the geo-what3words tools."""
