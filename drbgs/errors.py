"""
Exception hierarchy for drbgs.

Every failure is a caller contract violation. The library raises these and
never catches them itself; any fallback (e.g. switching from entropy to an
explicit seed) belongs to the caller, before construction.
"""


class DRBGError(Exception):
    """Base class for all drbgs errors."""


class PreconditionError(DRBGError, ValueError):
    """A caller broke an operation's precondition."""


class RotationError(PreconditionError):
    """Rotation shift outside (0, width) or value wider than width."""


class SeedError(PreconditionError):
    """Seed has the wrong number of words or a word outside [0, 2**64)."""


class ZeroStateError(PreconditionError):
    """All-zero seed for a generator whose zero state is absorbing."""


class UnsupportedOperationError(PreconditionError):
    """The generator does not provide the requested jump operation."""


class EntropyUnavailableError(DRBGError, OSError):
    """The entropy source could not deliver a usable seed."""


class UnknownGeneratorError(DRBGError, KeyError):
    """Registry lookup for a generator name that does not exist."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message
        return str(self.args[0]) if self.args else ""
