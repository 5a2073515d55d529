from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfigurationError
from .rules import CP1252_EXCEPTIONS, ISO_8859_15_EXCEPTIONS, NO_EXCEPTIONS


class AssumedEncoding(str, Enum):
    NONE = "none"
    CP1252 = "cp1252"
    ISO_8859_15 = "iso-8859-15"


# Keys are upper-cased with "-", "_" and spaces removed.
ENCODING_ALIASES: dict[str, AssumedEncoding] = {
    "": AssumedEncoding.NONE,
    "NONE": AssumedEncoding.NONE,
    "ISO88591": AssumedEncoding.NONE,
    "LATIN1": AssumedEncoding.NONE,
    "L1": AssumedEncoding.NONE,
    "CP1252": AssumedEncoding.CP1252,
    "WINDOWS1252": AssumedEncoding.CP1252,
    "WIN1252": AssumedEncoding.CP1252,
    "ISO885915": AssumedEncoding.ISO_8859_15,
    "LATIN9": AssumedEncoding.ISO_8859_15,
    "L9": AssumedEncoding.ISO_8859_15,
}

EXCEPTION_TABLES: Mapping[AssumedEncoding, Mapping[int, bytes]] = {
    AssumedEncoding.NONE: NO_EXCEPTIONS,
    AssumedEncoding.CP1252: CP1252_EXCEPTIONS,
    AssumedEncoding.ISO_8859_15: ISO_8859_15_EXCEPTIONS,
}


def parse_encoding(name: Union[str, AssumedEncoding, None]) -> AssumedEncoding:
    """Resolve a codepage name such as "windows-1252" or "latin-9".

    Raises:
        InvalidConfigurationError: the name is not one of the supported encodings.
    """
    if name is None:
        return AssumedEncoding.NONE
    if isinstance(name, AssumedEncoding):
        return name
    if not isinstance(name, str):
        raise InvalidConfigurationError(f"encoding name must be a string, got {type(name).__name__}")

    normalized = name.upper().replace("-", "").replace("_", "").replace(" ", "")
    try:
        return ENCODING_ALIASES[normalized]
    except KeyError:
        raise InvalidConfigurationError(f"unsupported encoding: {name!r}") from None


class FixOptions(BaseModel):
    """Validated settings for one repair; bad input raises InvalidConfigurationError."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    allow_control: bool = False
    assume: AssumedEncoding = AssumedEncoding.NONE

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidConfigurationError(str(exc)) from exc

    @field_validator("assume", mode="before")
    @classmethod
    def _resolve_assume(cls, value: Any) -> AssumedEncoding:
        return parse_encoding(value)

    @property
    def exception_table(self) -> Mapping[int, bytes]:
        return EXCEPTION_TABLES[self.assume]


def make_options(
    allow_control: bool = False,
    assume: Union[str, AssumedEncoding, None, Iterable[Union[str, AssumedEncoding, None]]] = None,
) -> FixOptions:
    """
    Build a validated FixOptions.

    `assume` may be a single encoding or a sequence of them; the last one wins.
    Any problem raises InvalidConfigurationError and nothing is built.
    """
    if assume is not None and not isinstance(assume, (str, AssumedEncoding)):
        if not isinstance(assume, Iterable):
            raise InvalidConfigurationError(f"encoding must be a name or a sequence of names, got {assume!r}")
        choices = list(assume)
        assume = choices[-1] if choices else None

    return FixOptions(allow_control=allow_control, assume=assume)


# --- API envelopes ---

class FixedContent(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class FixReport(BaseModel):
    input_bytes: int = 0
    output_bytes: int = 0
    ascii: int = 0
    utf8_sequences: int = 0
    legacy_bytes: int = 0
    exceptions_mapped: int = 0
    control_bytes: int = 0
    changed: bool = False
    assumed_encoding: AssumedEncoding = AssumedEncoding.NONE
    allow_control: bool = False


class FixResponse(BaseModel):
    fixed: FixedContent
    report: FixReport


class ErrorDetail(BaseModel):
    issue: str
    message: str
    offset: Optional[int] = None
    byte: Optional[str] = Field(default=None, examples=["0x81"])


class HealthResponse(BaseModel):
    ok: bool = True
