"""arXiv Deck: a one-card-at-a-time reader for the newest arXiv papers."""
