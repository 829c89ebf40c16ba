from .fetch_page import decode_page, fetch_page, starred_endpoint
from .fetch_starred import fetch_starred

__all__ = ["decode_page", "fetch_page", "fetch_starred", "starred_endpoint"]
