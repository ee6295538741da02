"""Read, write and manipulate playlists of music tracks"""
from pathlib import Path

MODULE_ROOT: str = Path(__file__).parent.name
PACKAGE_ROOT: Path = Path(__file__).parent.parent
