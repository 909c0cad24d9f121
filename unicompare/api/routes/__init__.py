# API Routes Module
from unicompare.api.routes import universities

__all__ = [
    "universities",
]
