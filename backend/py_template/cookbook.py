from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union
import logging
import threading

logger = logging.getLogger(__name__)


# ==== Type Definitions =======================================================
class EntryType(Enum):
	RECIPE = 'recipe'
	INGREDIENT = 'ingredient'


@dataclass(frozen=True)
class CookbookEntry:
	name: str

	entry_type: ClassVar[Optional[EntryType]] = None


@dataclass(frozen=True)
class RequiredItem():
	name: str
	quantity: int


@dataclass(frozen=True)
class Recipe(CookbookEntry):
	required_items: Tuple[RequiredItem, ...]

	entry_type: ClassVar[Optional[EntryType]] = EntryType.RECIPE

	def __post_init__(self) -> None:
		# stored recipes must not share a list the caller can still change
		object.__setattr__(self, 'required_items', tuple(self.required_items))


@dataclass(frozen=True)
class Ingredient(CookbookEntry):
	cook_time: int

	entry_type: ClassVar[Optional[EntryType]] = EntryType.INGREDIENT


class FailureKind(Enum):
	INVALID_ENTITY = 'invalid_entity'
	DUPLICATE_NAME = 'duplicate_name'
	NOT_FOUND = 'not_found'
	MISSING_REFERENCE = 'missing_reference'
	CYCLIC_REFERENCE = 'cyclic_reference'


@dataclass(frozen=True)
class Failure:
	kind: FailureKind
	message: str = ''


# =============================================================================
# ==== Cookbook store =========================================================
# =============================================================================
class Cookbook:
	"""
	Write-once store of recipes and ingredients keyed by name.

	Names are unique across both entry types. Entries are never updated or
	removed; a second insert under the same name is rejected. All access goes
	through one lock so readers never observe a half-finished insert.
	"""

	def __init__(self) -> None:
		self._entries: Dict[str, CookbookEntry] = {}
		self._lock = threading.Lock()

	def insert(self, entry: CookbookEntry) -> Union[CookbookEntry, Failure]:
		if not isinstance(entry, (Ingredient, Recipe)):
			return self._reject(FailureKind.INVALID_ENTITY, 'type must be recipe or ingredient')

		with self._lock:
			if entry.name in self._entries:
				return self._reject(FailureKind.DUPLICATE_NAME, f'{entry.name!r} already exists')

			failure = _validate(entry)
			if failure is not None:
				return self._reject(failure.kind, failure.message)

			self._entries[entry.name] = entry

		logger.info('Added %s %r', entry.entry_type.value, entry.name)
		return entry

	def lookup(self, name: str) -> Union[CookbookEntry, Failure]:
		with self._lock:
			entry = self._entries.get(name)
		if entry is None:
			return Failure(FailureKind.NOT_FOUND, f'{name!r} is not in the cookbook')
		return entry

	def snapshot(self) -> Dict[str, CookbookEntry]:
		with self._lock:
			return dict(self._entries)

	def __contains__(self, name: object) -> bool:
		with self._lock:
			return name in self._entries

	def __len__(self) -> int:
		with self._lock:
			return len(self._entries)

	@staticmethod
	def _reject(kind: FailureKind, message: str) -> Failure:
		logger.warning('Rejected entry (%s): %s', kind.value, message)
		return Failure(kind, message)


def _validate(entry: CookbookEntry) -> Optional[Failure]:
	if isinstance(entry, Ingredient):
		# cookTime >= 0
		if entry.cook_time < 0:
			return Failure(FailureKind.INVALID_ENTITY, 'cookTime must not be negative')
		return None

	seen_names = set()
	for item in entry.required_items:
		# requiredItems can only have one element per name
		if item.name in seen_names:
			return Failure(FailureKind.INVALID_ENTITY, f'{item.name!r} is listed more than once')
		seen_names.add(item.name)

		if item.quantity < 0:
			return Failure(FailureKind.INVALID_ENTITY, f'quantity of {item.name!r} must not be negative')
	return None


# =============================================================================
# ==== JSON shapes ============================================================
# =============================================================================
def _is_int(value: Any) -> bool:
	return isinstance(value, int) and not isinstance(value, bool)


def _is_name(value: Any) -> bool:
	return isinstance(value, str) and len(value.strip()) > 0


def entry_from_json(data: Any) -> Union[CookbookEntry, Failure]:
	"""Builds an entry from a request body, checking only its shape."""
	if not isinstance(data, dict):
		return Failure(FailureKind.INVALID_ENTITY, 'body must be a JSON object')

	# the autotester sends the entry directly, but {"entry": {...}} is accepted too
	entry = data.get('entry') if isinstance(data.get('entry'), dict) else data

	try:
		entry_type = EntryType(entry.get('type'))
	except ValueError:
		return Failure(FailureKind.INVALID_ENTITY, 'type must be recipe or ingredient')

	name = entry.get('name')
	if not _is_name(name):
		return Failure(FailureKind.INVALID_ENTITY, 'name must be a non-empty string')

	if entry_type is EntryType.INGREDIENT:
		cook_time = entry.get('cookTime')
		if not _is_int(cook_time):
			return Failure(FailureKind.INVALID_ENTITY, 'cookTime must be an integer')
		return Ingredient(name=name, cook_time=cook_time)

	required_items = entry.get('requiredItems')
	if not isinstance(required_items, list):
		return Failure(FailureKind.INVALID_ENTITY, 'requiredItems must be a list')

	parsed_items: List[RequiredItem] = []
	for item in required_items:
		if not isinstance(item, dict):
			return Failure(FailureKind.INVALID_ENTITY, 'each required item must be an object')

		item_name = item.get('name')
		quantity = item.get('quantity')
		if not _is_name(item_name):
			return Failure(FailureKind.INVALID_ENTITY, 'required item name must be a non-empty string')
		if not _is_int(quantity):
			return Failure(FailureKind.INVALID_ENTITY, f'quantity of {item_name!r} must be an integer')

		parsed_items.append(RequiredItem(name=item_name, quantity=quantity))

	return Recipe(name=name, required_items=parsed_items)


def entry_to_json(entry: CookbookEntry) -> Dict[str, Any]:
	if isinstance(entry, Ingredient):
		return {'type': entry.entry_type.value, 'name': entry.name, 'cookTime': entry.cook_time}
	return {
		'type': entry.entry_type.value,
		'name': entry.name,
		'requiredItems': [{'name': i.name, 'quantity': i.quantity} for i in entry.required_items],
	}
