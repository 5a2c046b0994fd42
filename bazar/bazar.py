import logging
from typing import Iterable

from . import parser
from .chapter import Chapter
from .rbtree import RedBlackSet

logger = logging.getLogger(__name__)


class Bazar:
    """An unsorted heap of pages to be grouped into chapters

    Args:
        k (int): number of words a page must share with a chapter's keywords
            to be filed under it
        dictionary: path of the word list; words missing from it are ignored
        pages: paths of the page files
    """

    def __init__(self, k: int, dictionary, pages: Iterable):
        if k < 0:
            raise ValueError(f"k must be a non-negative integer, got {k}")
        self.k = k
        self.dictionary = RedBlackSet()
        self.pages = RedBlackSet()
        self._load(dictionary, pages)

    def _load(self, dictionary, pages: Iterable):
        self.dictionary = parser.parse_dictionary(dictionary)
        for path in pages:
            if not self.pages.add(parser.parse_page(path)):
                logger.warning("page %s given more than once, ignoring it", path)
        logger.info("loaded %d pages and %d dictionary words",
                    len(self.pages), len(self.dictionary))

    def resolve(self) -> RedBlackSet:
        """Files every page under a chapter and returns the chapters"""
        for page in self.pages:
            page.words.retain_all(self.dictionary)

        # greedy pass: a page joins the first chapter it shares enough words
        # with, or opens a new one
        chapters = RedBlackSet()
        for page in self.pages:
            for chapter in chapters:
                if chapter.add_page(page, self.k):
                    logger.debug("page %s joins chapter %d", page.name, chapter.number)
                    break
            else:
                chapter = Chapter(len(chapters))
                chapter.add_page(page)
                chapters.add(chapter)
                logger.debug("page %s opens chapter %d", page.name, chapter.number)

        # a keyword shared by two chapters describes neither of them. compare
        # against snapshots so the outcome does not depend on chapter order
        snapshots = [(chapter, RedBlackSet(chapter.keywords)) for chapter in chapters]
        for chapter in chapters:
            for other, keywords in snapshots:
                if other is not chapter:
                    chapter.keywords.remove_all(keywords)

        logger.info("filed %d pages under %d chapters", len(self.pages), len(chapters))
        return chapters
