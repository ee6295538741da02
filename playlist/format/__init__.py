"""
Parsers and generators for converting between a :py:class:`.Playlist` and text playlist formats.
"""
