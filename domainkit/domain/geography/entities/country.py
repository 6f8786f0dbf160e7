"""
Country entity: reference data the address rules are checked against.
"""

import re
from dataclasses import dataclass, field

from domainkit.domain.common.entity import Entity
from domainkit.domain.common.exceptions import InvalidArgumentError
from domainkit.domain.common.guards import require_not_blank
from domainkit.domain.common.value_objects import CountryCode


@dataclass(eq=False)
class Country(Entity[CountryCode]):
    """
    Country with its cities and postcode format.

    Business Rules:
    - Name cannot be empty
    - The postcode pattern must be a valid regular expression
    - City names are compared case-insensitively
    """

    id: CountryCode
    name: str
    postcode_pattern: str
    cities: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = require_not_blank(self.name, "name")
        try:
            self._postcode_re = re.compile(self.postcode_pattern)
        except re.error as err:
            raise InvalidArgumentError(
                "postcode_pattern must be a valid regular expression",
                field="postcode_pattern",
                value=self.postcode_pattern,
            ) from err
        self.cities = frozenset(city.strip().casefold() for city in self.cities)

    def has_city(self, city: str) -> bool:
        return city.strip().casefold() in self.cities

    def accepts_postcode(self, postcode: str) -> bool:
        return self._postcode_re.fullmatch(postcode.strip()) is not None

    def add_city(self, city: str) -> None:
        self.cities = self.cities | {require_not_blank(city, "city").casefold()}
