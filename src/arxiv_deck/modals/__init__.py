"""Modal screens for the arXiv Deck TUI.

Import modals from this package: ``from arxiv_deck.modals import BookmarksScreen``
"""

from arxiv_deck.modals.bookmarks import (
    NO_BOOKMARKS_MESSAGE,
    BookmarkListItem,
    BookmarksScreen,
)

__all__ = [
    "NO_BOOKMARKS_MESSAGE",
    "BookmarkListItem",
    "BookmarksScreen",
]
