"""
Loader Module

Feeding records from data files into stores.

This module provides:
- Pydantic record schemas (PokemonRecord) and a name -> schema registry
- JSON and YAML record file loading, one handler call per record
- RecordHandler protocol and the StoreAdapter that writes into a KeyedStore
"""

__version__ = "0.1.0"

from .adapter import RecordHandler, StoreAdapter
from .errors import LoaderError
from .files import load_records, read_documents
from .schemas import RECORD_TYPES, BaseRecord, PokemonRecord, resolve_record_type

__all__ = [
    "BaseRecord",
    "LoaderError",
    "PokemonRecord",
    "RECORD_TYPES",
    "RecordHandler",
    "StoreAdapter",
    "load_records",
    "read_documents",
    "resolve_record_type",
]
