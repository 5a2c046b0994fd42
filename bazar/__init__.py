from .bazar import Bazar
from .chapter import Chapter, Page
from .rbtree import NIL, RedBlackSet, RedBlackTree

VERSION = (1, 0)
