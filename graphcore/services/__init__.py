"""
Services package — data set ingestion.

Public API:
    split_string        – delimiter tokenizer
    read_uint_record    – one line → validated unsigned integer record
    read_node_id_record – same, with node ID (non-zero) check
    DatasetReader       – fixed-arity record collection with error policy
"""
from .tokenizer import split_string
from .record_reader import (
    UINT32_MAX,
    is_valid_node_id,
    is_valid_uint,
    parse_uint,
    read_node_id_record,
    read_uint_record,
)
from .dataset_reader import DatasetReader, DatasetReadResult, read_dataset
from .exceptions import (
    LineTooLongError,
    RecordParseError,
    RecordReadError,
    StreamReadError,
)

__all__ = [
    'split_string',
    'UINT32_MAX',
    'is_valid_node_id',
    'is_valid_uint',
    'parse_uint',
    'read_node_id_record',
    'read_uint_record',
    'DatasetReader',
    'DatasetReadResult',
    'read_dataset',
    'LineTooLongError',
    'RecordParseError',
    'RecordReadError',
    'StreamReadError',
]
