"""Tests for the local filesystem probe."""

from __future__ import annotations

from pathlib import Path

import pytest

from audio_intelligence.l3_interface_adapters.gateways.local_file_probe import LocalFileProbe


class TestLocalFileProbe:
    def test_reads_size_and_media_type(self, tmp_path: Path):
        p = tmp_path / 'clip.wav'
        p.write_bytes(b'\x00' * 2048)
        audio = LocalFileProbe().probe(p)
        assert audio.name == 'clip.wav'
        assert audio.size == 2048
        assert audio.media_type.startswith('audio/')
        assert audio.path == str(p)

    def test_unknown_type_leaves_media_type_empty(self, tmp_path: Path):
        p = tmp_path / 'blob.zzqq'
        p.write_bytes(b'1')
        audio = LocalFileProbe().probe(p)
        assert audio.media_type == ''
        assert audio.type_label == 'ZZQQ'

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match='File not found'):
            LocalFileProbe().probe(tmp_path / 'nope.mp3')

    def test_directory_is_not_a_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LocalFileProbe().probe(tmp_path)
