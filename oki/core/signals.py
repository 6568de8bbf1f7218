"""Completion signals — what happens when a countdown reaches zero.

The core only carries the choice through a run; playing a tone or buzzing is
the host's job.  The metadata here (labels, icons, sound files) is what a
host needs to render the choice and act on it.
"""

from enum import Enum
from pathlib import Path

# Lossless formats first
SOUND_EXTENSIONS = ("aiff", "aif", "wav", "m4a", "flac", "mp3")

# How long a haptic alert is given before the timer view is dismissed
HAPTIC_DISMISS_DELAY_MS = 500


class CompletionSignal(Enum):
    SILENT = "None"
    HAPTIC = "Vibrate"
    TONE_A = "Bell"
    TONE_B = "Kru"

    @property
    def label(self):
        return self.value

    @property
    def icon_name(self):
        return _ICONS[self]

    @property
    def is_custom_icon(self):
        """True when the icon is a bundled image rather than a theme icon."""
        return self in (CompletionSignal.TONE_A, CompletionSignal.TONE_B)

    @property
    def sound_file_stem(self):
        return _SOUND_STEMS.get(self)

    @property
    def plays_sound(self):
        return self.sound_file_stem is not None

    @staticmethod
    def from_label(label):
        for signal in CompletionSignal:
            if signal.value == label:
                return signal
        return None


_ICONS = {
    CompletionSignal.SILENT: "audio-volume-muted",
    CompletionSignal.HAPTIC: "notification",
    CompletionSignal.TONE_A: "bell-icon",
    CompletionSignal.TONE_B: "kru-icon",
}

_SOUND_STEMS = {
    CompletionSignal.TONE_A: "bell-sound",
    CompletionSignal.TONE_B: "kru-sound",
}


def find_sound_files(signal, assets_dir):
    """Return every existing sound file for ``signal`` in ``assets_dir``.

    Files are listed in ``SOUND_EXTENSIONS`` order, so a host can fall back
    to the next format when one fails to load.  Empty for signals without a
    sound, or when no file in a supported format exists.
    """
    stem = signal.sound_file_stem
    if stem is None:
        return []
    assets_dir = Path(assets_dir)
    candidates = (assets_dir / f"{stem}.{ext}" for ext in SOUND_EXTENSIONS)
    return [path for path in candidates if path.is_file()]
