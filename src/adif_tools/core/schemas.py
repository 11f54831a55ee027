"""Field and enumeration data shapes.

These are the immutable records the validation engine reads. Instances are
built once by :class:`adif_tools.spec.SpecRegistry` and shared by every
validation call; nothing in the engine mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Mapping, Optional, Tuple

from .enums import DataType
from .errors import SpecConfigurationError


@dataclass(frozen=True)
class EnumValue:
    """One member of an enumeration.

    Attributes:
        display: The string used in log files (e.g. "SSB", "YT", "20m").
        properties: Named attributes of this value. Which names are present
            depends on the enumeration (a subdivision carries its
            "DXCC Entity Code", a mode carries nothing beyond its description).

    Examples:
        >>> yukon = EnumValue("YT", {"DXCC Entity Code": "1"})
        >>> yukon.property("DXCC Entity Code")
        '1'
        >>> yukon.property("Import-only")
        ''
    """

    display: str
    properties: Mapping[str, str] = field(default_factory=dict)

    def property(self, name: str) -> str:
        """Return the named property, or "" if this value does not carry it."""
        return self.properties.get(name, "")

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class Enumeration:
    """A named controlled vocabulary.

    Attributes:
        name: Enumeration name (e.g. "Primary_Administrative_Subdivision").
        properties: Property names declared for this enumeration's values.
        values: Values in table order; the first match wins on ambiguous lookups.
        scope_property: Property compared against a scope key field, if any
            field scopes this enumeration.
    """

    name: str
    properties: Tuple[str, ...] = ()
    values: Tuple[EnumValue, ...] = ()
    scope_property: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that values and scope only use declared properties."""
        declared = set(self.properties)
        if self.scope_property is not None and self.scope_property not in declared:
            raise SpecConfigurationError(
                f"Enumeration {self.name}: scope property '{self.scope_property}' "
                f"is not one of its properties {list(self.properties)}"
            )
        for value in self.values:
            extra = set(value.properties) - declared
            if extra:
                raise SpecConfigurationError(
                    f"Enumeration {self.name}: value '{value.display}' has undeclared "
                    f"properties {sorted(extra)}"
                )

    def find(self, value: str, case_sensitive: bool = False) -> List[EnumValue]:
        """Return every value whose display string equals ``value``.

        Matching is case-insensitive unless ``case_sensitive`` is set. Results
        keep table order.
        """
        if case_sensitive:
            return [v for v in self.values if v.display == value]
        folded = value.casefold()
        return [v for v in self.values if v.display.casefold() == folded]

    def __str__(self) -> str:
        return self.name

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Field:
    """Metadata for one ADIF field.

    Attributes:
        name: Upper-case field name (e.g. "QSO_DATE").
        type: Data type, selecting the validator.
        min_value: Inclusive lower bound for numeric types.
        max_value: Inclusive upper bound for numeric types.
        enumeration_name: Bound enumeration, if any.
        enumeration_scope_field: Field whose value narrows the bound enumeration
            (e.g. "DXCC" for STATE, "MODE" for SUBMODE).
        header_only: Field may only appear in a log file header.
        import_only: Field is deprecated; accepted on import but not for export.
        description: Short human-readable description.
    """

    name: str
    type: DataType
    min_value: Optional[Decimal] = None
    max_value: Optional[Decimal] = None
    enumeration_name: Optional[str] = None
    enumeration_scope_field: Optional[str] = None
    header_only: bool = False
    import_only: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        """Validate field metadata invariants."""
        if self.enumeration_scope_field and not self.enumeration_name:
            raise SpecConfigurationError(
                f"Field {self.name}: scope field {self.enumeration_scope_field} "
                f"requires an enumeration"
            )
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise SpecConfigurationError(
                f"Field {self.name}: minimum {self.min_value} exceeds maximum {self.max_value}"
            )

    def __str__(self) -> str:
        return self.name


__all__ = ["EnumValue", "Enumeration", "Field"]
