from .author import router as author_router
from .book import router as book_router
from .costumer import router as costumer_router
from .health import router as health_router
from .rental import router as rental_router

__all__ = ["author_router", "book_router", "costumer_router", "health_router", "rental_router"]
