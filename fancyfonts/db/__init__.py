from fancyfonts.db.database import commit_or_rollback, get_session, init_db
from fancyfonts.db.operations import (
    delete_preferences,
    get_preference,
    set_preference,
)

__all__ = [
    "commit_or_rollback",
    "delete_preferences",
    "get_preference",
    "get_session",
    "init_db",
    "set_preference",
]
