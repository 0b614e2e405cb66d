# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Errors raised by the bridging layer itself.

Anything raised by a wrapped function or by a target's own dynamic entry point
is not represented here: those exceptions propagate to the caller untouched.
"""

from __future__ import annotations

from typing import Sequence, Tuple


class InteropError(Exception):
	"""Base class for errors detected by dynbridge."""


class ArityMismatch(InteropError, TypeError):
	"""Raised when a closure is called with the wrong number of arguments."""

	def __init__(self, callable_desc: str, expected: int, actual: int) -> None:
		self.callable_desc = callable_desc
		self.expected = expected
		self.actual = actual
		super().__init__(f"{callable_desc} expects {expected} argument(s), got {actual}")


class MethodNotFound(InteropError, LookupError):
	"""Raised when reflective dispatch finds no method accepting the arguments."""

	def __init__(self, method_name: str, target_type: str, arg_types: Sequence[str]) -> None:
		self.method_name = method_name
		self.target_type = target_type
		self.arg_types: Tuple[str, ...] = tuple(arg_types)
		super().__init__(
			f"no method '{method_name}' on {target_type} accepting ({', '.join(self.arg_types)})"
		)


__all__ = ["InteropError", "ArityMismatch", "MethodNotFound"]
