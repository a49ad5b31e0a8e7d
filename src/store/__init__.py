"""Compiled asset storage layer.

This module holds the immutable path-keyed asset table, its entry
serialization, and the exactly-once payload materializer.
"""
