"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: GeoJSON literals, defaults, WGS 84 bounds
- exceptions: Conversion error hierarchy
"""
