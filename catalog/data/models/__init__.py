from catalog.data.models.product import ProductModel

__all__ = ["ProductModel"]
