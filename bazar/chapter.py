import functools
from typing import Optional

from .rbtree import RedBlackSet


@functools.total_ordering
class Page:
    """A named page and the set of words found on it

    Pages are ordered and compared by name only, so two pages loaded from the
    same path are the same page.
    """

    def __init__(self, name: str, words: Optional[RedBlackSet] = None):
        self.name = name
        self.words = words if words is not None else RedBlackSet()

    def __eq__(self, other):
        if not isinstance(other, Page):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other):
        if not isinstance(other, Page):
            return NotImplemented
        return self.name < other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Page({self.name!r}, {len(self.words)} words)"


@functools.total_ordering
class Chapter:

    def __init__(self, number: int):
        self.number = number
        self.keywords = RedBlackSet()
        self.pages = RedBlackSet()

    def __eq__(self, other):
        if not isinstance(other, Chapter):
            return NotImplemented
        return self.number == other.number

    def __lt__(self, other):
        if not isinstance(other, Chapter):
            return NotImplemented
        return self.number < other.number

    def __hash__(self):
        return hash(self.number)

    def __repr__(self):
        return f"Chapter({self.number}, pages={list(self.pages)})"

    def __str__(self):
        return (f"Chapter {self.number}\n"
                f"  pages: {' '.join(self.pages)}\n"
                f"  keywords: {' '.join(self.keywords)}")

    def common_words(self, page: Page) -> int:
        return sum(1 for word in page.words if word in self.keywords)

    def add_page(self, page: Page, k: Optional[int] = None) -> bool:
        """Adds page to the chapter if it shares at least k of its keywords

        Without k the page is always accepted. An accepted page's words become
        keywords of the chapter.
        """
        if k is not None and self.common_words(page) < k:
            return False
        self.pages.add(page.name)
        self.keywords.update(page.words)
        return True
