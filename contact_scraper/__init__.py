"""Contact scraper: find validated contact emails and social profiles on a website."""

__version__ = "1.0.0"
