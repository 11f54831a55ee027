"""ADIF validation tools: field validation engine for amateur-radio logs.

The package validates raw field values from ADIF contact logs against the
interchange specification's data types and controlled vocabularies. Record
readers and writers live outside the engine; the CLI operates on CSV logs.
"""

__all__ = [
    "__version__",
]

__version__ = "0.3.0"
