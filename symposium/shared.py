"""A dinner where the forks lie in a shared pile and every diner has its own monitor."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, TextIO

from symposium.clock import Clock
from symposium.config import Settings

_MONITOR_PAUSE = 0.0001
_FORK_POLL = 0.001


@dataclass(eq=False)
class Diner:
    """One guest and the state its monitor watches."""

    id: int
    last_meal: int = 0
    eat_count: int = 0
    is_eating: bool = False
    finished: bool = False
    meal_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class SharedTable:
    """Runs the diners, each watched by its own monitor.

    The forks form one pool that any diner may draw from.  The first death
    stops every diner and nothing is printed after it.
    """

    def __init__(
        self,
        settings: Settings,
        out: Optional[TextIO] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.clock = clock if clock is not None else Clock()
        self.forks = threading.Semaphore(settings.count)
        self.diners = [Diner(id=index + 1) for index in range(settings.count)]
        self.casualty: Optional[int] = None
        self._killed = False
        self._kill_lock = threading.Lock()
        self._print_lock = threading.Lock()

    # -- shared state -------------------------------------------------------

    def _is_killed(self) -> bool:
        with self._kill_lock:
            return self._killed

    def _kill(self, diner: Diner) -> bool:
        with self._kill_lock:
            if self._killed:
                return False
            self._killed = True
            self.casualty = diner.id
            return True

    def is_over(self) -> bool:
        """Whether someone died or every diner has left the table."""
        if self._is_killed():
            return True
        return all(self._has_left(diner) for diner in self.diners)

    @staticmethod
    def _has_left(diner: Diner) -> bool:
        with diner.meal_lock:
            return diner.finished

    def _announce(self, diner: Diner, state: str) -> None:
        if self._is_killed():
            return
        with self._print_lock:
            if not self._is_killed():
                self.out.write(f"{self.clock.now()} {diner.id} {state}\n")

    def _wait(self, duration: int) -> None:
        self.clock.sleep(duration, self._is_killed)

    def _has_eaten_enough(self, diner: Diner) -> bool:
        if not self.settings.meal_limited:
            return False
        with diner.meal_lock:
            count = diner.eat_count
        return count >= self.settings.meals_required

    # -- diner --------------------------------------------------------------

    def _take_fork(self) -> bool:
        while not self._is_killed():
            if self.forks.acquire(timeout=_FORK_POLL):
                return True
        return False

    def _pick_up_forks(self, diner: Diner) -> bool:
        if self._is_killed() or not self._take_fork():
            return False
        self._announce(diner, "has taken a fork")
        if not self._take_fork():
            self.forks.release()
            return False
        self._announce(diner, "has taken a fork")
        return True

    def _put_down_forks(self) -> None:
        self.forks.release()
        self.forks.release()

    def _eat(self, diner: Diner) -> None:
        if self._is_killed() or not self._pick_up_forks(diner):
            return
        self._announce(diner, "is eating")
        with diner.meal_lock:
            diner.last_meal = self.clock.now()
            diner.eat_count += 1
            diner.is_eating = True
        self._wait(self.settings.time_to_eat)
        self._put_down_forks()
        with diner.meal_lock:
            diner.is_eating = False

    def _sleep(self, diner: Diner) -> None:
        if self._is_killed():
            return
        self._announce(diner, "is sleeping")
        self._wait(self.settings.time_to_sleep)

    def _initial_delay(self, diner: Diner, first_round: bool) -> None:
        settings = self.settings
        if first_round:
            if settings.count % 2 and diner.id == 1:
                self._wait(settings.time_to_eat)
            if diner.id % 2:
                self._wait(settings.time_to_eat // 2)

    def _pacing_delay(self) -> None:
        settings = self.settings
        if settings.count % 2 and settings.time_to_eat >= settings.time_to_sleep:
            self._wait(5)

    def _alone(self, diner: Diner) -> None:
        with self.forks:
            self._announce(diner, "has taken a fork")
        self._wait(self.settings.time_to_die)
        with self._print_lock:
            self.out.write(f"{self.clock.now()} {diner.id} died\n")

    def _dine(self, diner: Diner) -> None:
        monitor = threading.Thread(
            target=self._monitor, args=(diner,), name=f"monitor-{diner.id}"
        )
        monitor.start()
        first_round = True
        while not self._is_killed():
            self._announce(diner, "is thinking")
            self._initial_delay(diner, first_round)
            self._eat(diner)
            if self._has_eaten_enough(diner):
                break
            self._sleep(diner)
            self._pacing_delay()
            first_round = False
        monitor.join()

    def _routine(self, diner: Diner) -> None:
        with diner.meal_lock:
            diner.last_meal = self.clock.now()
        try:
            if self.settings.count == 1:
                self._alone(diner)
            else:
                self._dine(diner)
        finally:
            with diner.meal_lock:
                diner.finished = True

    # -- monitor ------------------------------------------------------------

    def _check(self, diner: Diner) -> bool:
        if self._is_killed():
            return True
        with diner.meal_lock:
            last_meal = diner.last_meal
            eating = diner.is_eating
        if not eating and self._has_eaten_enough(diner):
            return True
        if not eating and self.clock.now() - last_meal > self.settings.time_to_die:
            if self._kill(diner):
                with self._print_lock:
                    self.out.write(f"{self.clock.now()} {diner.id} died\n")
            return True
        return False

    def _monitor(self, diner: Diner) -> None:
        while not self._is_killed():
            if self._check(diner):
                return
            time.sleep(_MONITOR_PAUSE)

    def run(self) -> None:
        """Seat every diner and wait until they have all left or one has died."""
        threads = [
            threading.Thread(target=self._routine, args=(diner,),
                             name=f"diner-{diner.id}")
            for diner in self.diners
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()


def run_shared(settings: Settings, out: Optional[TextIO] = None) -> SharedTable:
    """Run one shared-pool dinner to its end and return the finished table."""
    table = SharedTable(settings, out)
    table.run()
    return table