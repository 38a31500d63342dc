from dataclasses import dataclass
from typing import Any, Dict, List, Set, Union
import logging

from cookbook import Cookbook, CookbookEntry, Failure, FailureKind, Ingredient, Recipe, RequiredItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecipeSummary:
	name: str
	cook_time: int
	ingredients: List[RequiredItem]

	def to_json(self) -> Dict[str, Any]:
		return {
			'name': self.name,
			'cookTime': self.cook_time,
			'ingredients': [{'name': i.name, 'quantity': i.quantity} for i in self.ingredients],
		}


def summarize(cookbook: Cookbook, name: str) -> Union[RecipeSummary, Failure]:
	"""
	Expands a recipe down to its base ingredients.

	Cook time is the sum of every ingredient's cook time weighted by how many
	units the whole expansion needs. The same ingredient reached through
	different sub-recipes is reported once with the quantities summed.

	Fails with NOT_FOUND if `name` is not a recipe, MISSING_REFERENCE if any
	required item at any depth is absent, and CYCLIC_REFERENCE if a recipe
	requires itself, directly or through other recipes.
	Recipes nested deeper than the interpreter's recursion limit raise
	RecursionError.
	"""
	entries = cookbook.snapshot()

	if not isinstance(entries.get(name), Recipe):
		logger.warning('Summary requested for %r, which is not a recipe', name)
		return Failure(FailureKind.NOT_FOUND, f'{name!r} is not a recipe in the cookbook')

	result = _expand(entries, name, set(), {})
	if isinstance(result, Failure):
		logger.warning('Summary of %r failed (%s): %s', name, result.kind.value, result.message)
		return result

	logger.info('Summarized %r: cookTime=%d, %d ingredients', name, result.cook_time, len(result.ingredients))
	return result


def _expand(
	entries: Dict[str, CookbookEntry],
	name: str,
	active: Set[str],
	done: Dict[str, RecipeSummary],
) -> Union[RecipeSummary, Failure]:
	"""
	Summarizes one recipe. `active` holds the recipes currently being expanded
	above this one; `done` caches sub-summaries already computed in this call.
	"""
	if name in done:
		return done[name]

	active.add(name)
	totals: Dict[str, int] = {}
	cook_time = 0

	for req in entries[name].required_items:
		entry = entries.get(req.name)

		if entry is None:
			return Failure(
				FailureKind.MISSING_REFERENCE,
				f'{name!r} requires {req.name!r}, which is not in the cookbook',
			)

		# ingredient leaf
		if isinstance(entry, Ingredient):
			totals[req.name] = totals.get(req.name, 0) + req.quantity
			cook_time += entry.cook_time * req.quantity
			continue

		# recipe node
		if req.name in active:
			return Failure(
				FailureKind.CYCLIC_REFERENCE,
				f'{req.name!r} requires itself through {name!r}',
			)

		logger.debug('Expanding %r x%d inside %r', req.name, req.quantity, name)
		sub = _expand(entries, req.name, active, done)
		if isinstance(sub, Failure):
			return sub
		for ing in sub.ingredients:
			totals[ing.name] = totals.get(ing.name, 0) + ing.quantity * req.quantity
		cook_time += sub.cook_time * req.quantity

	active.discard(name)
	result = RecipeSummary(
		name=name,
		cook_time=cook_time,
		ingredients=[RequiredItem(name=n, quantity=q) for n, q in totals.items()],
	)
	done[name] = result
	return result
