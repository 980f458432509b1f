from .db_session import DbSessionService
from .db_utils import translate_store_errors

__all__ = ["DbSessionService", "translate_store_errors"]
