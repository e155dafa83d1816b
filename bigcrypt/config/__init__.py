# Configuration Module
"""
Parameter loading for the signing and key-exchange pipelines:
- Frozen pydantic parameter models
- JSON parameter file reader
- Chunked message file reader
"""

from .params import (
    DEFAULT_PRIVATE_SCALAR,
    SigningParams,
    ExchangeParams,
    read_params_file,
    signing_params_from_mapping,
    exchange_params_from_mapping,
    load_signing_params,
    load_exchange_params,
    default_params_path,
    iter_message_chunks,
)

__all__ = [
    'DEFAULT_PRIVATE_SCALAR',
    'SigningParams',
    'ExchangeParams',
    'read_params_file',
    'signing_params_from_mapping',
    'exchange_params_from_mapping',
    'load_signing_params',
    'load_exchange_params',
    'default_params_path',
    'iter_message_chunks',
]
