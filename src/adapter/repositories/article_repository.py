import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from src.app.repositories.article_repository import IArticleRepository
from src.domain.article import Article

logger = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL)
ARTICLE_SUFFIX = ".md"


def parse_front_matter(content: str) -> Tuple[dict, str]:
    """Split a Markdown document into its YAML front matter and body"""
    content = content.lstrip("\ufeff")
    match = FRONT_MATTER_PATTERN.match(content)
    if match is None:
        return {}, content

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"Invalid front matter: {e}")
        return {}, match.group(2)

    if not isinstance(data, dict):
        data = {}
    return data, match.group(2)


class MarkdownArticleRepository(IArticleRepository):
    """Articles stored as <id>.md files in a single directory"""

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def _load(self, path: Path) -> Optional[Article]:
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Skipping article {path.name}: not valid UTF-8 ({e})")
            return None

        front_matter, body = parse_front_matter(content)
        return Article(id=path.stem, front_matter=front_matter, body=body)

    async def list_all(self) -> List[Article]:
        paths = sorted(p for p in self.directory.iterdir() if p.suffix == ARTICLE_SUFFIX)
        articles = [self._load(p) for p in paths]
        return [a for a in articles if a is not None]

    async def get(self, article_id: str) -> Optional[Article]:
        if not article_id or article_id.startswith(".") or "/" in article_id or "\\" in article_id:
            return None

        path = self.directory / f"{article_id}{ARTICLE_SUFFIX}"
        if not path.is_file():
            return None
        return self._load(path)
