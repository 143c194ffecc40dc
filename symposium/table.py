"""A dinner in one process: one thread per philosopher, one lock per fork."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, TextIO

from symposium.clock import Clock
from symposium.config import Settings

_MONITOR_PAUSE = 0.0005


@dataclass(eq=False)
class Philosopher:
    """One seat at the table and the state the monitor watches."""

    id: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int = 0
    eat_count: int = 0
    is_eating: bool = False
    meal_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    count_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class Table:
    """Runs the philosophers and the monitor that decides when dinner ends."""

    def __init__(
        self,
        settings: Settings,
        out: Optional[TextIO] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.clock = clock if clock is not None else Clock()
        self.forks = [threading.Lock() for _ in range(settings.count)]
        self.philosophers = [
            Philosopher(id=index + 1, left_fork=self.forks[index - 1],
                        right_fork=self.forks[index])
            for index in range(settings.count)
        ]
        self._dead = False
        self._dead_lock = threading.Lock()
        self._print_lock = threading.Lock()

    # -- shared state -------------------------------------------------------

    def is_over(self) -> bool:
        """Whether someone died or everyone has eaten enough."""
        with self._dead_lock:
            return self._dead

    def _stop(self) -> None:
        with self._dead_lock:
            self._dead = True

    def _announce(self, philo: Philosopher, state: str) -> None:
        with self._print_lock:
            if self.is_over():
                return
            self.out.write(f"{self.clock.now()} {philo.id} {state}\n")

    def _wait(self, duration: int) -> None:
        self.clock.sleep(duration, self.is_over)

    def _has_eaten_enough(self, philo: Philosopher) -> bool:
        if not self.settings.meal_limited:
            return False
        with philo.count_lock:
            return philo.eat_count >= self.settings.meals_required

    # -- philosopher --------------------------------------------------------

    def _pick_up_forks(self, philo: Philosopher) -> None:
        if philo.id % 2:
            first, second = philo.right_fork, philo.left_fork
        else:
            first, second = philo.left_fork, philo.right_fork
        first.acquire()
        self._announce(philo, "has taken a fork")
        second.acquire()
        self._announce(philo, "has taken a fork")

    @staticmethod
    def _put_down_forks(philo: Philosopher) -> None:
        if philo.id % 2:
            philo.left_fork.release()
            philo.right_fork.release()
        else:
            philo.right_fork.release()
            philo.left_fork.release()

    def _eat(self, philo: Philosopher) -> None:
        if self.is_over():
            return
        self._pick_up_forks(philo)
        with philo.meal_lock:
            philo.last_meal = self.clock.now()
            philo.is_eating = True
        self._announce(philo, "is eating")
        with philo.count_lock:
            philo.eat_count += 1
        self._wait(self.settings.time_to_eat)
        with philo.meal_lock:
            philo.is_eating = False
        self._put_down_forks(philo)

    def _sleep(self, philo: Philosopher) -> None:
        if self.is_over():
            return
        self._announce(philo, "is sleeping")
        self._wait(self.settings.time_to_sleep)

    def _initial_delay(self, philo: Philosopher, first_round: bool) -> None:
        settings = self.settings
        if first_round:
            if settings.count % 2 and philo.id == 1:
                self._wait(settings.time_to_eat)
            if philo.id % 2:
                self._wait(settings.time_to_eat // 2)

    def _pacing_delay(self) -> None:
        settings = self.settings
        if settings.count % 2 and settings.time_to_eat >= settings.time_to_sleep:
            self._wait(5)

    def _alone(self, philo: Philosopher) -> None:
        with philo.right_fork:
            self._announce(philo, "has taken a r fork")

    def _routine(self, philo: Philosopher) -> None:
        with philo.meal_lock:
            philo.last_meal = self.clock.now()
        if self.settings.count == 1:
            self._alone(philo)
            return
        first_round = True
        while not self.is_over():
            self._announce(philo, "is thinking")
            self._initial_delay(philo, first_round)
            self._eat(philo)
            self._sleep(philo)
            self._pacing_delay()
            first_round = False

    # -- monitor ------------------------------------------------------------

    def _check(self, philo: Philosopher) -> bool:
        with philo.meal_lock:
            last_meal = philo.last_meal
            eating = philo.is_eating
        if not eating and self.clock.now() - last_meal > self.settings.time_to_die:
            self._stop()
            with self._print_lock:
                self.out.write(f"{self.clock.now()} {philo.id} died\n")
            return True
        if all(self._has_eaten_enough(p) for p in self.philosophers):
            self._stop()
            return True
        return False

    def _monitor(self) -> None:
        while not self.is_over():
            if any(self._check(philo) for philo in self.philosophers):
                return
            time.sleep(_MONITOR_PAUSE)

    def run(self) -> None:
        """Start every philosopher and the monitor, and wait for them all."""
        threads = [
            threading.Thread(target=self._routine, args=(philo,),
                             name=f"philosopher-{philo.id}")
            for philo in self.philosophers
        ]
        for thread in threads:
            thread.start()
        monitor = threading.Thread(target=self._monitor, name="monitor")
        monitor.start()
        for thread in threads:
            thread.join()
        monitor.join()


def run_table(settings: Settings, out: Optional[TextIO] = None) -> Table:
    """Run one dinner to its end and return the finished table."""
    table = Table(settings, out)
    table.run()
    return table