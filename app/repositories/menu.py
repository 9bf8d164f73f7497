"""Menu repository."""

from app.models import MenuItem
from app.repositories.base import Repository


class MenuRepository(Repository[MenuItem]):
    model = MenuItem
