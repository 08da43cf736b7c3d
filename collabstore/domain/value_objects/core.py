"""Domain value objects.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass

from collabstore.domain.enums import ResourceType
from collabstore.domain.exceptions import InvalidIDError
from collabstore.shared.utils.generators import generate_cuid

# Value of an identifier that has not been assigned by a repository yet.
NIL_ID_VALUE = ""


@dataclass(frozen=True, order=True)
class ID:
    """Identifier of a domain entity: a unique value tagged with its resource type.

    Ordering compares the value first, then the type label. ``str(id)``
    is the canonical value and is what cache keys and the record store see.
    """

    value: str
    type: ResourceType

    def __post_init__(self) -> None:
        if not isinstance(self.type, ResourceType):
            try:
                object.__setattr__(self, "type", ResourceType(self.type))
            except ValueError as e:
                raise InvalidIDError(
                    f"Unknown resource type: {self.type!r}", field="type"
                ) from e

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new(cls, rtype: ResourceType) -> "ID":
        """Return a fresh identifier of the given type."""
        return cls(generate_cuid(), rtype)

    @classmethod
    def nil(cls, rtype: ResourceType) -> "ID":
        """Return the placeholder identifier used before an entity is stored."""
        return cls(NIL_ID_VALUE, rtype)

    @classmethod
    def from_string(cls, value: str, rtype: ResourceType | str) -> "ID":
        """Parse an identifier from its canonical value and type label.

        Raises:
            InvalidIDError: If the value is empty or the type is unknown.
        """
        if not value:
            raise InvalidIDError("ID value must be a non-empty string", field="value")
        return cls(value, rtype)

    @property
    def label(self) -> str:
        """Resource-type label (e.g. "Issue")."""
        return self.type.value

    def is_nil(self) -> bool:
        return self.value == NIL_ID_VALUE

    def validate(
        self,
        expected_type: ResourceType | None = None,
        *,
        allow_nil: bool = False,
    ) -> None:
        """Validate the identifier.

        Args:
            expected_type: If given, the identifier must carry this type.
            allow_nil: Accept the nil placeholder (unsaved entities).

        Raises:
            InvalidIDError: If the ID is nil (unless allowed) or of the wrong type.
        """
        if not allow_nil and self.is_nil():
            raise InvalidIDError(f"{self.label} ID must not be nil", field="id")
        if expected_type is not None and self.type != expected_type:
            raise InvalidIDError(
                f"Expected {expected_type.value} ID, got {self.label}", field="type"
            )
