from .client import DirectoryClient
from .service import DirectoryService

__all__ = ["DirectoryClient", "DirectoryService"]
