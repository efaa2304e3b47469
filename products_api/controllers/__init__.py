from .products_controller import DEFAULT_PRODUCTS, ProductsController

__all__ = ["DEFAULT_PRODUCTS", "ProductsController"]
