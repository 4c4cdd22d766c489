"""Adapters layer - Concrete implementations of ports.

Currently only the Google Maps web services are wired in.
"""
