from .wav import WavOptions, convert_to_wav, parse_audio_mime_type, wav_header

__all__ = ["WavOptions", "convert_to_wav", "parse_audio_mime_type", "wav_header"]
