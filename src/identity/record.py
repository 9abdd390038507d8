"""SIN record model.

A SIN record bundles the key material and metadata used by BitAuth: the
private key, the public key, the System Identification Number derived from
the public key, and the creation timestamp. Key generation and SIN
derivation happen elsewhere; the record only carries their results.
"""
import logging
from dataclasses import dataclass

from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# Rendering and hashing order.
_FIELD_ORDER = ("created", "priv", "pub", "sin")


@dataclass(frozen=True, repr=False)
class SinRecord:
    """Immutable SIN credential bundle with value semantics.

    Two records are equal when all four fields are equal, and equal records
    hash equal, so records can be used as dict keys or set members.
    """

    priv: str
    pub: str
    sin: str
    created: int

    def __post_init__(self) -> None:
        for name in ("priv", "pub", "sin", "created"):
            if getattr(self, name) is None:
                logger.debug("Rejected SIN record: %s is missing", name)
                raise InvalidArgumentError(name)
        if not self.priv:
            logger.debug("Rejected SIN record: priv is empty")
            raise InvalidArgumentError("priv", "priv cannot be empty")

    def __hash__(self) -> int:
        return hash((self.created, self.priv, self.pub, self.sin))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(created={self.created!r}, priv={self.priv!r}, "
            f"pub={self.pub!r}, sin={self.sin!r})"
        )

    def as_dict(self) -> dict[str, object]:
        """Return the four fields as a plain dict, in rendering order."""
        return {name: getattr(self, name) for name in _FIELD_ORDER}
