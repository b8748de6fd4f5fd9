"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Recognised GeoJSON type tags, style property names, marker sizes
- exceptions: Custom exception hierarchy
"""
