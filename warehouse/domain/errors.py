# warehouse/domain/errors.py
"""
Domain error taxonomy. Raised by services and the product repository,
translated to HTTP responses by the handlers registered in warehouse.main.
"""


class WarehouseError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(WarehouseError):
    """Malformed or out-of-range arguments."""
    status_code = 400


class NotFound(WarehouseError):
    """Referenced product does not exist."""
    status_code = 404


class DuplicateKey(WarehouseError):
    """A product with the same product_id already exists."""
    status_code = 409
