"""Core wiki components: repository, pages, store and parser."""
