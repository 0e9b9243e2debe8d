from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set


@dataclass(slots=True)
class KeyTracker:
	"""Tracks physically held keys so key-down fires once per press.

	Backends that auto-repeat send several presses for one held key; only the
	first one passes ``press`` until the key is released again.
	"""

	_held: Set[str] = field(init=False, default_factory=set, repr=False)

	def press(self, key: str) -> bool:
		if key in self._held:
			return False
		self._held.add(key)
		return True

	def release(self, key: str) -> bool:
		if key not in self._held:
			return False
		self._held.discard(key)
		return True

	def is_held(self, key: str) -> bool:
		return key in self._held

	@property
	def held(self) -> frozenset[str]:
		return frozenset(self._held)

	def reset(self) -> None:
		self._held.clear()
