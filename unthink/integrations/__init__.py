"""HTTP clients for hosted collaborators (object storage, serverless functions)."""

from .functions import FunctionsClient
from .storage import StorageClient

__all__ = ["FunctionsClient", "StorageClient"]
