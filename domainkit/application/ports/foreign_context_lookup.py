"""Protocol for identity lookups in a foreign bounded context."""

from collections.abc import Mapping
from typing import Protocol

from domainkit.domain.common.identity import Identity


class ForeignContextLookupProtocol(Protocol):
    """Read-only identity resolution against another bounded context."""

    context_name: str

    def resolve(self, criteria: Mapping[str, object]) -> Identity:
        """
        Resolve the identity the foreign context holds for ``criteria``.

        Raises:
            ForeignIdentityUnavailableError: If nothing matches
        """
        ...
