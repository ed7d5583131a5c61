# app/clients/__init__.py

from app.clients.blog_client import BlogClient
from app.clients.memory_client import MemoryClient
from app.clients.protocols import CacheClientProtocol

__all__ = ["BlogClient", "CacheClientProtocol", "MemoryClient"]
