from collabstore.domain.value_objects.core import ID

__all__ = ["ID"]
