from collabstore.infrastructure.external.storage.static_file import StaticFileStore

__all__ = ["StaticFileStore"]
