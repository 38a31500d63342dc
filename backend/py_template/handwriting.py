from typing import Optional
import re

_SEPARATORS = re.compile(r'[-_]')
_NOT_LETTER_OR_SPACE = re.compile(r'[^A-Za-z\s]')
_WHITESPACE = re.compile(r'\s+')


def parse_handwriting(recipeName: Optional[str]) -> Optional[str]:
	"""
	Cleans a scribbled recipe name into title case.

	Returns None when nothing readable is left.
	"""
	if not recipeName or not isinstance(recipeName, str):
		return None

	# hyphens/underscores become spaces
	s = _SEPARATORS.sub(' ', recipeName)

	# anything that's not a letter or whitespace goes
	s = _NOT_LETTER_OR_SPACE.sub('', s)

	# squash whitespace + trim ends
	s = _WHITESPACE.sub(' ', s).strip()

	if len(s) == 0:
		return None

	return ' '.join(w[:1].upper() + w[1:].lower() for w in s.split(' '))
