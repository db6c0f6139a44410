"""Needs of a villager that decay over time."""

from __future__ import annotations

from dataclasses import dataclass, field

from .events import Signal

STAT_MIN = 0.0
STAT_MAX = 100.0
DECAY_INTERVAL = 1.0


@dataclass
class PawnStats:
    """Hunger, thirst, energy and happiness, each between 0 and 100.

    Once per second every stat drops by its rate, the need flags are
    recomputed against their thresholds and ``on_state_changed`` is emitted.
    Each ``on_*_changed`` signal receives the new value when it changes.
    """

    hunger_decrease_rate: float = 0.1
    thirst_decrease_rate: float = 0.2
    energy_decrease_rate: float = 0.05
    happiness_decrease_rate: float = 0.03

    hunger: float = 100.0
    thirst: float = 100.0
    energy: float = 100.0
    happiness: float = 100.0

    hungry_threshold: float = 30.0
    thirst_threshold: float = 30.0
    energy_threshold: float = 30.0
    happiness_threshold: float = 30.0

    hungry: bool = False
    thirsty: bool = False
    tired: bool = False
    sad: bool = False

    on_hunger_changed: Signal = field(default_factory=Signal, repr=False, compare=False)
    on_thirst_changed: Signal = field(default_factory=Signal, repr=False, compare=False)
    on_energy_changed: Signal = field(default_factory=Signal, repr=False, compare=False)
    on_happiness_changed: Signal = field(default_factory=Signal, repr=False, compare=False)
    on_state_changed: Signal = field(default_factory=Signal, repr=False, compare=False)

    _elapsed: float = field(default=0.0, init=False, repr=False, compare=False)

    def decrease(self) -> None:
        """Apply one second of decay, refresh the need flags and notify."""
        self.modify_hunger(-self.hunger_decrease_rate)
        self.modify_thirst(-self.thirst_decrease_rate)
        self.modify_energy(-self.energy_decrease_rate)
        self.modify_happiness(-self.happiness_decrease_rate)

        self.hungry = self.hunger < self.hungry_threshold
        self.thirsty = self.thirst < self.thirst_threshold
        self.tired = self.energy < self.energy_threshold
        self.sad = self.happiness < self.happiness_threshold

        self.on_state_changed.emit()

    def advance(self, seconds: float) -> int:
        """Let time pass; decays once per whole second elapsed. Returns the count."""
        if seconds < 0:
            raise ValueError("time cannot run backwards")
        self._elapsed += seconds
        ticks = 0
        while self._elapsed >= DECAY_INTERVAL:
            self._elapsed -= DECAY_INTERVAL
            self.decrease()
            ticks += 1
        return ticks

    def _change(self, name: str, amount: float, signal: Signal) -> None:
        old = getattr(self, name)
        new = min(max(old + amount, STAT_MIN), STAT_MAX)
        setattr(self, name, new)
        if new != old:
            signal.emit(new)

    def modify_hunger(self, amount: float) -> None:
        self._change("hunger", amount, self.on_hunger_changed)

    def modify_thirst(self, amount: float) -> None:
        self._change("thirst", amount, self.on_thirst_changed)

    def modify_energy(self, amount: float) -> None:
        self._change("energy", amount, self.on_energy_changed)

    def modify_happiness(self, amount: float) -> None:
        self._change("happiness", amount, self.on_happiness_changed)