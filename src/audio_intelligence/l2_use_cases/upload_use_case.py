"""Use case: client-side validation of a selected audio file."""

from __future__ import annotations

import logging

from audio_intelligence.l1_entities.audio_file import AudioFile
from audio_intelligence.l1_entities.config import UploadConfig
from audio_intelligence.l1_entities.errors import FileTooLargeError, UnsupportedFormatError

log = logging.getLogger('audint.upload')


def format_size_limit(max_bytes: int) -> str:
    return f'{max_bytes / 1024 / 1024:g}MB'


def validate_audio_file(file: AudioFile, accepted_formats: list[str], max_bytes: int) -> None:
    """Raise an UploadValidationError subclass if *file* cannot be accepted.

    The extension is checked before the size, so an oversized file with a
    bad extension reports the extension.
    """
    if file.extension not in accepted_formats:
        raise UnsupportedFormatError(f'File type not supported. Please use: {", ".join(accepted_formats)}')
    if file.size > max_bytes:
        raise FileTooLargeError(f'File too large. Maximum size is {format_size_limit(max_bytes)}')


class ValidateUploadUseCase:
    """Checks extension and size against the configured upload limits."""

    def __init__(self, config: UploadConfig) -> None:
        self._config = config

    @property
    def accepted_formats(self) -> list[str]:
        return list(self._config.accepted_formats)

    @property
    def max_bytes(self) -> int:
        return self._config.max_size_bytes

    def execute(self, file: AudioFile) -> AudioFile:
        """Return *file* unchanged when valid. Raises UploadValidationError otherwise."""
        try:
            validate_audio_file(file, self._config.accepted_formats, self._config.max_size_bytes)
        except (UnsupportedFormatError, FileTooLargeError) as e:
            log.info('Rejected upload %s (%d bytes): %s', file.name, file.size, e)
            raise
        log.debug('Accepted upload %s (%.2f MB, %s)', file.name, file.size_mb, file.type_label)
        return file
