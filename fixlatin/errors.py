from __future__ import annotations


class FixLatinError(ValueError):
    """Base class for everything that stops a repair."""

    issue = "fix_latin_error"


class ControlCharacterError(FixLatinError):
    """A C1 control byte (0x80-0x9F) was found while controls are disallowed."""

    issue = "control_character"

    def __init__(self, offset: int, byte: int):
        self.offset = offset
        self.byte = byte
        super().__init__(f"control character 0x{byte:02X} at offset {offset}")


class InvalidConfigurationError(FixLatinError):
    issue = "invalid_configuration"
