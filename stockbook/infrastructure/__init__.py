"""Infrastructure adapters: configuration, logging, HTTP and SQL access."""
