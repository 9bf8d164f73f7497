"""Review repository. Reviews are read-only over HTTP; the seed script writes them."""

from app.models import Review
from app.repositories.base import Repository


class ReviewRepository(Repository[Review]):
    model = Review
