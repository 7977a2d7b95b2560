# tests/integration/__init__.py

"""Integration tests for json_ez

These tests walk through complete build, encode, decode and read scenarios
using only the public package API.
"""
