import logging
import re

from .chapter import Page
from .rbtree import RedBlackSet

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"\w+")


def read_words(path) -> RedBlackSet:
    """Returns the set of lower-cased words found in a UTF-8 text file"""
    words = RedBlackSet()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            words.update(word.lower() for word in WORD_PATTERN.findall(line))
    return words


def parse_dictionary(path) -> RedBlackSet:
    words = read_words(path)
    logger.debug("read %d dictionary words from %s", len(words), path)
    return words


def parse_page(path) -> Page:
    page = Page(str(path), read_words(path))
    logger.debug("read %d words from page %s", len(page.words), page.name)
    return page
