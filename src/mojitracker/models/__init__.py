"""
Domain values decoded from tracker responses.
"""

from .destination import Destination
from .file_metadata import FileMetadata

__all__ = ["Destination", "FileMetadata"]
