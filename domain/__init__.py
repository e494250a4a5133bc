"""
Domain layer - Business entities, models, schemas, and enums.
"""

from domain import enums, models, nutrition, schemas

__all__ = ["enums", "models", "nutrition", "schemas"]
