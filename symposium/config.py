"""Settings of a dinner, built from the command-line arguments."""

from __future__ import annotations

from dataclasses import dataclass

from symposium.parsing import ArgumentError, parse_arguments

MAX_PHILOSOPHERS = 200


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int = 0

    @property
    def meal_limited(self) -> bool:
        """Whether the dinner ends once everyone has eaten enough."""
        return self.meals_required > 0

    @classmethod
    def from_arguments(cls, args: list[str]) -> "Settings":
        """Validate the arguments after the program name and build settings."""
        args = list(args)
        values = parse_arguments(args)
        count = values[0]
        if count > MAX_PHILOSOPHERS or count <= 0:
            raise ArgumentError(
                f"Error: '{args[0]}' there must be between 1 and "
                f"{MAX_PHILOSOPHERS} philosophers."
            )
        meals = values[4] if len(values) == 5 else 0
        return cls(
            count=count,
            time_to_die=values[1],
            time_to_eat=values[2],
            time_to_sleep=values[3],
            meals_required=meals,
        )


def semaphore_names(prefix: str, count: int) -> list[str]:
    """Return ``count`` named-semaphore names: ``/<prefix>0``, ``/<prefix>1``..."""
    return [f"/{prefix}{index}" for index in range(count)]