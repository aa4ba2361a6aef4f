"""
Application services.

Each service wraps the repository bundle (and, where needed, the hosted
storage and functions clients) and implements one area of the product.
Routers obtain them through the dependencies in ``deps``.
"""
