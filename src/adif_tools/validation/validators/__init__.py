"""Data type validators.

Every validator is a pure function with the signature::

    validator(value, field, ctx, registry=None) -> ValidityResult

where ``value`` is the raw field string, ``field`` the field's metadata,
``ctx`` a :data:`~adif_tools.validation.context.ValidationContext` and
``registry`` the tables used to resolve enumerations (the packaged tables when
omitted).

Conventions:

1. An empty value is always valid; presence is the record model's concern.
2. Malformed values are reported as INVALID_ERROR or INVALID_WARNING results,
   never raised. Only configuration faults (an unknown enumeration, say) raise.
3. Validators do not log and keep no state between calls.

To add a validator for a new data type, add a member to
:class:`~adif_tools.core.enums.DataType`, implement the function in this
package, and register it in ``TYPE_VALIDATORS`` in ``validation/registry.py``.
"""

from __future__ import annotations

from typing import Optional, Protocol

from adif_tools.core.schemas import Field
from adif_tools.spec import SpecRegistry
from ..context import ValidationContext
from ..models import ValidityResult


class TypeValidator(Protocol):
    """Protocol implemented by every data type validator."""

    def __call__(
        self,
        value: str,
        field: Field,
        ctx: ValidationContext,
        registry: Optional[SpecRegistry] = None,
    ) -> ValidityResult:
        ...


__all__ = ["TypeValidator"]
