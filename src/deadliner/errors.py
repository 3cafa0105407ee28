from __future__ import annotations


class DeadlinerError(Exception):
    """Base class for render failures. ``message`` is shown to the user as-is."""

    default_message = "Couldn't render the wallpaper!"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigError(DeadlinerError, ValueError):
    default_message = "Invalid configuration!"


class PastDeadline(DeadlinerError):
    default_message = "Deadline must be a future date!"


class MalformedDeadline(DeadlinerError):
    default_message = "Invalid deadline! Expected a date like 2022-08-26 and a time like 7:28 PM."


class BackgroundError(DeadlinerError):
    default_message = "Couldn't load the background image!"


class BackgroundNotFound(BackgroundError):
    default_message = "Couldn't find the background image!"


class BackgroundDecodeError(BackgroundError):
    default_message = "Couldn't read the background image!"


class BackgroundDownloadError(BackgroundError):
    default_message = "Couldn't download the Image from the supplied URL!"


class InvalidFont(DeadlinerError):
    default_message = "Couldn't load the selected font!"


class SizeMismatch(DeadlinerError):
    default_message = "Font size is bigger than wallpaper's dimensions!"


class PersistError(DeadlinerError):
    default_message = "Couldn't save result.png"
