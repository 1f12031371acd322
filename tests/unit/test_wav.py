"""
Unit tests for WAV packaging of raw PCM.
"""

import struct

import pytest

from presi.application.audio import (
    WavOptions,
    convert_to_wav,
    parse_audio_mime_type,
    wav_header,
)
from presi.domain_core.exceptions import InvalidAudioFormat


class TestParseAudioMimeType:
    def test_defaults(self):
        assert parse_audio_mime_type("audio/wav") == WavOptions(1, 22050, 16)

    def test_bits_and_rate(self):
        options = parse_audio_mime_type("audio/L24;codec=pcm;rate=24000")
        assert options.bits_per_sample == 24
        assert options.sample_rate == 24000

    def test_bad_rate_raises(self):
        with pytest.raises(InvalidAudioFormat, match="bad rate"):
            parse_audio_mime_type("audio/L16;rate=fast")

    def test_bad_bit_depth_raises(self):
        with pytest.raises(InvalidAudioFormat):
            parse_audio_mime_type("audio/L12")


class TestWavHeader:
    def test_layout(self):
        header = wav_header(1000, WavOptions(num_channels=1, sample_rate=24000, bits_per_sample=16))

        assert len(header) == 44
        assert header[0:4] == b"RIFF"
        assert struct.unpack_from("<I", header, 4)[0] == 1036
        assert header[8:16] == b"WAVEfmt "
        assert struct.unpack_from("<IHHIIHH", header, 16) == (16, 1, 1, 24000, 48000, 2, 16)
        assert header[36:40] == b"data"
        assert struct.unpack_from("<I", header, 40)[0] == 1000

    def test_convert_to_wav_prepends_header(self):
        pcm = b"\x00\x01" * 10
        wav = convert_to_wav(pcm, "audio/L16;rate=24000")

        assert len(wav) == 44 + len(pcm)
        assert wav.endswith(pcm)
        assert struct.unpack_from("<I", wav, 24)[0] == 24000
