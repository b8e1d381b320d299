"""Web boundary layer.

- contracts/: request and response models
- services/: the quoting collaborator
- handlers: query parsing and error classification
- controllers/: FastAPI routers
- middleware/: error-to-HTTP mapping

Everything here is read-only; no transaction is signed or sent.
"""

__all__ = [
    "contracts",
    "services",
    "handlers",
    "controllers",
    "middleware",
]
