"""Products — controllers, ``{placeholder}`` paths and the 404 page.

Demonstrates (controller, action) handlers, path variables passed as
positional arguments, and first-match ordering.

Inspect:
    PYTHONPATH=. minimvc routes app:app
    PYTHONPATH=. minimvc match app:app GET /products/12345/categories/abcde
"""

from minimvc import App


class HomeController:
    def index(self) -> str:
        return "Hello, World!"


class ProductController:
    def featured(self) -> str:
        return "Featured products"

    def show(self, product_id: str) -> str:
        return f"Product ID: {product_id}"

    def categories(self, product_id: str, category_id: str) -> str:
        return f"Product ID: {product_id}, Category ID: {category_id}"


app = App()
app.get("/", (HomeController, "index"))
# Literal path first, or /products/{id} would capture "featured".
app.get("/products/featured", (ProductController, "featured"))
app.get("/products/{id}", (ProductController, "show"))
app.get("/products/{id}/categories/{cat}", (ProductController, "categories"))
