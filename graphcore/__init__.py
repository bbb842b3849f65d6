"""
graphcore — command interpreter core for graph data.

Public API:
    CommandRegistry     – owning, name-keyed collection of commands
    Command             – abstract command (name, synopsis, help, execute)
    CommandProcessor    – command line parsing, redirection and rendering
    CommandStatus       – SUCCESS / FAILURE / ERROR / NONE
    StatusMessage       – one rendered command outcome
    DatasetReader       – node / arc data set ingestion
    CliConfig           – interpreter configuration
"""
from .config import CliConfig, DEFAULT_CONFIG
from .status import CommandStatus, StatusMessage, STATUS_PREFIXES, format_status
from .services import (
    DatasetReader,
    DatasetReadResult,
    read_dataset,
    read_node_id_record,
    read_uint_record,
    split_string,
)
from .cli import (
    Command,
    CommandContext,
    CommandProcessor,
    CommandRegistry,
    CommandResult,
    ReturnType,
    create_default_registry,
)

__version__ = '1.0.0'

__all__ = [
    'CliConfig',
    'DEFAULT_CONFIG',
    'CommandStatus',
    'StatusMessage',
    'STATUS_PREFIXES',
    'format_status',
    'DatasetReader',
    'DatasetReadResult',
    'read_dataset',
    'read_node_id_record',
    'read_uint_record',
    'split_string',
    'Command',
    'CommandContext',
    'CommandProcessor',
    'CommandRegistry',
    'CommandResult',
    'ReturnType',
    'create_default_registry',
]
