"""
Parameter Loading

Reads the JSON parameter file into immutable pydantic models and streams
message files for signing.

Parameter file fields:
- Signing:      n (modulus), e (public exponent), d (private exponent)
- Key exchange: p (prime modulus), g (generator), y_s (server public value),
                x (optional client private scalar)

Big integers may be given as decimal strings, 0x-prefixed hex strings or
JSON integers. Unknown fields are ignored so a single file can hold both
parameter sets.
"""

import json
import os
from typing import Any, Dict, Iterator, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..common.exceptions import ConfigurationError, MessageLoadError
from ..core_crypto.modexp import parse_int


# Environment variables consulted for default file locations (may come from .env)
PARAMS_FILE_ENV = 'BIGCRYPT_PARAMS_FILE'
MESSAGE_FILE_ENV = 'BIGCRYPT_MESSAGE_FILE'
DEFAULT_PARAMS_FILE = 'params.json'

# Client private scalar used when the parameter file does not supply one
DEFAULT_PRIVATE_SCALAR = 123456789

CHUNK_SIZE = 64 * 1024

PathLike = Union[str, os.PathLike]


def _to_int(value: Any) -> int:
    try:
        return parse_int(value)
    except TypeError as exc:
        raise ValueError(str(exc)) from exc


class SigningParams(BaseModel):
    """RSA key parameters (n, e, d). Read-only once loaded."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    n: int = Field(..., gt=1, description="RSA modulus")
    e: int = Field(..., ge=1, description="Public exponent")
    d: int = Field(..., ge=1, description="Private exponent")

    @field_validator('n', 'e', 'd', mode='before')
    @classmethod
    def _parse_big_int(cls, value: Any) -> int:
        return _to_int(value)

    @property
    def key_size(self) -> int:
        """Modulus size in bits."""
        return self.n.bit_length()


class ExchangeParams(BaseModel):
    """Diffie-Hellman domain parameters plus the local private scalar."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    p: int = Field(..., gt=2, description="Prime modulus")
    g: int = Field(..., ge=1, description="Generator")
    y_s: int = Field(..., ge=0, description="Server (peer) public value")
    private_scalar: int = Field(
        DEFAULT_PRIVATE_SCALAR,
        ge=1,
        validation_alias=AliasChoices('x', 'private_scalar'),
        description="Client private scalar, never transmitted",
    )

    @field_validator('p', 'g', 'y_s', 'private_scalar', mode='before')
    @classmethod
    def _parse_big_int(cls, value: Any) -> int:
        return _to_int(value)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = '.'.join(str(item) for item in error['loc']) or '<root>'
        parts.append(f"{location}: {error['msg']}")
    return '; '.join(parts)


def read_params_file(path: PathLike) -> Dict[str, Any]:
    """
    Read a JSON parameter file into a dict.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not JSON,
                            or not a JSON object
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read parameter file '{path}': {exc}") from exc

    try:
        data = json.loads(content)
    except ValueError as exc:
        # JSONDecodeError, or an integer literal beyond the int digit limit
        raise ConfigurationError(f"Parameter file '{path}' is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Parameter file '{path}' must contain a JSON object")

    return data


def signing_params_from_mapping(data: Dict[str, Any], source: str = '<mapping>') -> SigningParams:
    """Validate a mapping into SigningParams, raising ConfigurationError."""
    try:
        return SigningParams.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid signing parameters in {source}: {_describe(exc)}") from exc


def exchange_params_from_mapping(data: Dict[str, Any], source: str = '<mapping>') -> ExchangeParams:
    """Validate a mapping into ExchangeParams, raising ConfigurationError."""
    try:
        return ExchangeParams.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid key-exchange parameters in {source}: {_describe(exc)}") from exc


def load_signing_params(path: PathLike) -> SigningParams:
    """Load n, e, d from a JSON parameter file."""
    return signing_params_from_mapping(read_params_file(path), f"'{path}'")


def load_exchange_params(path: PathLike) -> ExchangeParams:
    """Load p, g, y_s (and optionally x) from a JSON parameter file."""
    return exchange_params_from_mapping(read_params_file(path), f"'{path}'")


def default_params_path() -> str:
    """Parameter file named by BIGCRYPT_PARAMS_FILE, else ./params.json."""
    return os.getenv(PARAMS_FILE_ENV) or DEFAULT_PARAMS_FILE


def iter_message_chunks(path: PathLike, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield the message file's bytes in chunks.

    The file is opened on the first next() call.

    Raises:
        MessageLoadError: If the file cannot be opened or read
    """
    try:
        with open(path, 'rb') as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                yield chunk
    except OSError as exc:
        raise MessageLoadError(f"Cannot read message file '{path}': {exc}") from exc
