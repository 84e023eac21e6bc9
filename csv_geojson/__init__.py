"""CSV to GeoJSON point conversion.

Reads ``latitude,longitude`` rows from a delimited text file and writes a
GeoJSON ``FeatureCollection`` with one ``Point`` feature per row.
"""

__version__ = "0.1.0"
