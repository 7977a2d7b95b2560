# json_ez/core/__init__.py

"""Core document model and type definitions"""
