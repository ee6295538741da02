"""
Base classes and attribute models for all playlist model objects.
"""
from ._base import PlaylistModel
