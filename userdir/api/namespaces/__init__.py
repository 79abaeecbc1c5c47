"""RestX namespaces."""
