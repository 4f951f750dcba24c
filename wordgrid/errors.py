"""Exception types raised by the wordgrid core."""


class WordGridError(Exception):
    """Base class for all wordgrid errors."""


class LoadError(WordGridError):
    """A dictionary source could not be read or decoded."""


class OutOfRangeError(WordGridError, IndexError):
    """A board coordinate lies outside the grid."""


class DuplicateIdentityError(WordGridError, ValueError):
    """The same player name appears more than once in scoring input."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate player identity: '{name}'")
        self.name = name


class PlayerError(WordGridError):
    """A player could not join, leave or act in the game."""


class PlayerNotFoundError(PlayerError, KeyError):
    """No player with the given name is known."""

    def __init__(self, name: str):
        super().__init__(f"Unknown player: '{name}'")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class RoundStateError(WordGridError, RuntimeError):
    """An operation was attempted in the wrong round phase."""
