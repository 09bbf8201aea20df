# actor_core/music_synth.py
"""
Music bed synthesis from emotion music parameters.

A single decaying sine tone per clip:

    sample(t) = sin(2*pi * base_frequency * t * tempo) * 0.05 * exp(-t / decay)

Good enough for a background bed under the narration; the audio stage
mixes it and the recorder encodes it.
"""

import logging
import wave
from pathlib import Path
from typing import Union

import numpy as np

from .emotion_modifiers import MusicParameters

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_RATE = 44100
DEFAULT_MUSIC_DURATION = 10.0
MUSIC_AMPLITUDE = 0.05


def render_music_bed(
    params: MusicParameters,
    duration: float = DEFAULT_MUSIC_DURATION,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    channels: int = 2
) -> np.ndarray:
    """
    Render the music bed.

    Args:
        params: Music parameters for the scene
        duration: Length in seconds (<= 0 gives an empty buffer)
        sample_rate: Samples per second
        channels: Output channels (identical content per channel)

    Returns:
        float32 array of shape (num_samples, channels)
    """
    num_samples = max(int(sample_rate * duration), 0)
    t = np.arange(num_samples, dtype=np.float64) / sample_rate

    tone = np.sin(2 * np.pi * params.base_frequency * t * params.tempo)
    envelope = MUSIC_AMPLITUDE * np.exp(-t / params.decay)
    mono = (tone * envelope).astype(np.float32)

    logger.debug(
        f"Rendered music bed: {params.base_frequency:.1f}Hz x{params.tempo} "
        f"decay={params.decay}s, {num_samples} samples"
    )
    return np.repeat(mono[:, np.newaxis], channels, axis=1)


def write_wav(
    samples: np.ndarray,
    output_path: Union[str, Path],
    sample_rate: int = DEFAULT_SAMPLE_RATE
) -> Path:
    """
    Write float samples in [-1, 1] as 16-bit PCM WAV.

    Args:
        samples: Array of shape (num_samples,) or (num_samples, channels)
        output_path: Destination file
        sample_rate: Samples per second

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if samples.ndim == 1:
        samples = samples[:, np.newaxis]
    channels = samples.shape[1]

    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype('<i2')

    with wave.open(str(output_path), 'w') as wav_file:
        wav_file.setnchannels(channels)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(pcm.tobytes())

    logger.info(f"Wrote music bed: {output_path} ({len(samples) / sample_rate:.2f}s)")
    return output_path
