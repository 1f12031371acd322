"""
WAV packaging for raw PCM returned by text-to-speech providers.

Providers answer with MIME types such as ``audio/L16;codec=pcm;rate=24000``;
the PCM bytes need the canonical 44-byte RIFF header to be playable.
"""

import struct
from dataclasses import dataclass

from presi.domain_core.exceptions import InvalidAudioFormat

HEADER_SIZE = 44
# RIFF chunk, "fmt " subchunk (PCM), "data" subchunk header
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


@dataclass(frozen=True)
class WavOptions:
    num_channels: int = 1
    sample_rate: int = 22050
    bits_per_sample: int = 16

    @property
    def block_align(self) -> int:
        return self.num_channels * self.bits_per_sample // 8

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.block_align


def parse_audio_mime_type(mime_type: str) -> WavOptions:
    """Read bits per sample and sample rate out of a PCM MIME type."""
    file_type, *params = [part.strip() for part in mime_type.split(";")]
    _, _, subtype = file_type.partition("/")

    bits = WavOptions.bits_per_sample
    rate = WavOptions.sample_rate
    if subtype.upper().startswith("L") and subtype[1:].isdigit():
        bits = int(subtype[1:])

    for param in params:
        key, _, value = param.partition("=")
        if key.strip().lower() == "rate":
            try:
                rate = int(value.strip())
            except ValueError as exc:
                raise InvalidAudioFormat(mime_type, f"bad rate {value!r}") from exc

    if bits <= 0 or bits % 8:
        raise InvalidAudioFormat(mime_type, f"unsupported bit depth {bits}")
    if rate <= 0:
        raise InvalidAudioFormat(mime_type, f"unsupported sample rate {rate}")
    return WavOptions(sample_rate=rate, bits_per_sample=bits)


def wav_header(data_length: int, options: WavOptions) -> bytes:
    return _HEADER.pack(
        b"RIFF",
        36 + data_length,
        b"WAVE",
        b"fmt ",
        16,
        1,
        options.num_channels,
        options.sample_rate,
        options.byte_rate,
        options.block_align,
        options.bits_per_sample,
        b"data",
        data_length,
    )


def convert_to_wav(raw_pcm: bytes, mime_type: str) -> bytes:
    return wav_header(len(raw_pcm), parse_audio_mime_type(mime_type)) + raw_pcm
