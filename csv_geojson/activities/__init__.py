"""Conversion stages.

Each stage is a plain function called in sequence by the pipeline:
read_points → map_features → serialize_features → write_document.
"""
