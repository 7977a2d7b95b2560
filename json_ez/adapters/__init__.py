# json_ez/adapters/__init__.py

"""Adapters binding Documents to their textual form"""

# Local imports
from json_ez.adapters.codec import decode
from json_ez.adapters.codec import encode
from json_ez.adapters.codec import inline

__all__ = ["decode", "encode", "inline"]
