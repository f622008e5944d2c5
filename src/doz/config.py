"""Aggregation configuration.

ValidationConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from typing import Literal

from doz.errors import ConfigurationError

type FlagPolicy = Literal["all", "last"]

_POLICIES: frozenset[str] = frozenset({"all", "last"})


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Aggregator configuration. Immutable after creation.

    ``flag_policy`` decides how the overall ``valid`` flag is computed:

    - ``"all"`` — valid only when every field is valid.
    - ``"last"`` — the flag is overwritten field by field, so the last
      field visited decides. Earlier failures can be hidden by a later
      success. Kept for compatibility with results produced by older
      releases.

    ``log_failures`` emits a DEBUG record per failing field on the
    ``doz.aggregate`` logger.
    """

    flag_policy: FlagPolicy = "all"
    log_failures: bool = True

    def __post_init__(self) -> None:
        if self.flag_policy not in _POLICIES:
            options = ", ".join(sorted(_POLICIES))
            msg = f"Unknown flag_policy {self.flag_policy!r} (expected one of: {options})"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ValidationConfig()
