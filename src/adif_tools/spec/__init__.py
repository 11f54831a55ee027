"""Static ADIF field and enumeration tables.

Tables ship as YAML under ``spec/data`` and are loaded once per process by
:func:`default_registry`. Pass custom paths to :class:`SpecRegistry` to
validate against other tables.
"""

from __future__ import annotations

from .registry import SpecRegistry, default_registry

__all__ = ["SpecRegistry", "default_registry"]
