from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.article import Article


class IArticleRepository(ABC):
    """Article repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[Article]:
        """All articles ordered by id. Raises OSError if the store is unreadable."""
        pass

    @abstractmethod
    async def get(self, article_id: str) -> Optional[Article]:
        """Get a single article by id"""
        pass
