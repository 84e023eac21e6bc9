"""Pipeline orchestration.

Runs the conversion stages in order and reports the outcome.
"""
