"""Infrastructure: cache, record store, object store and repository wiring."""
