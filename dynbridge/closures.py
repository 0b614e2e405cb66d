# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Closures: fixed-arity Python callables behind an untyped calling convention.

A `Closure` is what a dynamic target receives when it is handed a block of
code. It is invoked with raw positional arguments (`call(*args)`), and it
carries a mutable `delegate` the target may assign before calling it. The
arity is taken from the subclass's `do_call` signature once, when the class
is defined, and every call is checked against it.

The FunctionClosureN adapters wrap an ordinary function of arity N. They never
inspect or coerce the values flowing through them: `None` is a valid argument,
delegate, and result everywhere.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, ClassVar, Optional

from dynbridge.errors import ArityMismatch

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _do_call_arity(cls: type) -> int:
	params = list(inspect.signature(cls.__dict__["do_call"]).parameters.values())[1:]
	for param in params:
		if param.kind not in _POSITIONAL:
			raise TypeError(f"{cls.__qualname__}.do_call must take fixed positional parameters only")
	return len(params)


class Closure:
	"""
	Base class for untyped callables.

	Subclasses define `do_call(self, ...)` with a fixed number of positional
	parameters. `owner` is the object that created the closure, `this_object`
	the object it was created in, and `delegate` (initially the owner) the
	receiver the target wants the closure to run against.
	"""

	_arity: ClassVar[Optional[int]] = None

	def __init_subclass__(cls, **kwargs: Any) -> None:
		super().__init_subclass__(**kwargs)
		if "do_call" in cls.__dict__:
			cls._arity = _do_call_arity(cls)

	def __init__(self, owner: object = None, this_object: object = None) -> None:
		if self._arity is None:
			raise TypeError(f"{type(self).__qualname__} does not define do_call")
		self.owner = owner
		self.this_object = this_object
		self.delegate: object = owner

	@property
	def maximum_number_of_parameters(self) -> int:
		assert self._arity is not None
		return self._arity

	def set_delegate(self, delegate: object) -> None:
		self.delegate = delegate

	def call(self, *args: object) -> Any:
		if len(args) != self._arity:
			raise ArityMismatch(repr(self), self.maximum_number_of_parameters, len(args))
		return self.do_call(*args)  # type: ignore[attr-defined]

	__call__ = call

	def __repr__(self) -> str:
		return f"<{type(self).__qualname__}/{self._arity}>"


class FunctionClosure0(Closure):
	def __init__(self, function: Callable[[], Any], owner: object = None, this_object: object = None) -> None:
		super().__init__(owner, this_object)
		self.function = function

	def do_call(self) -> Any:
		return self.function()


class FunctionClosure1(Closure):
	"""
	One-argument adapter. The argument is the receiver of `function` in
	receiver-style use (see `closure_of`); the call surface is the same either way.
	"""

	def __init__(self, function: Callable[[Any], Any], owner: object = None, this_object: object = None) -> None:
		super().__init__(owner, this_object)
		self.function = function

	def do_call(self, it: Any) -> Any:
		return self.function(it)


class FunctionClosure2(Closure):
	def __init__(self, function: Callable[[Any, Any], Any], owner: object = None, this_object: object = None) -> None:
		super().__init__(owner, this_object)
		self.function = function

	def do_call(self, first: Any, second: Any) -> Any:
		return self.function(first, second)


class FunctionClosure3(Closure):
	def __init__(
		self, function: Callable[[Any, Any, Any], Any], owner: object = None, this_object: object = None
	) -> None:
		super().__init__(owner, this_object)
		self.function = function

	def do_call(self, first: Any, second: Any, third: Any) -> Any:
		return self.function(first, second, third)


class DelegateClosure(Closure):
	"""Zero-argument closure that runs `action` against its current delegate."""

	def __init__(self, action: Callable[[Any], Any], owner: object = None, this_object: object = None) -> None:
		super().__init__(owner, this_object)
		self.action = action

	def do_call(self) -> Any:
		return self.action(self.delegate)


def closure_of(action: Callable[[Any], Any], owner: object = None) -> FunctionClosure1:
	"""Closure that applies `action` to the single argument it is called with."""
	return FunctionClosure1(action, owner, owner)


def delegate_closure_of(action: Callable[[Any], Any], owner: object = None) -> DelegateClosure:
	"""Closure that applies `action` to whatever delegate is set when it is called."""
	return DelegateClosure(action, owner, owner)


__all__ = [
	"Closure",
	"FunctionClosure0",
	"FunctionClosure1",
	"FunctionClosure2",
	"FunctionClosure3",
	"DelegateClosure",
	"closure_of",
	"delegate_closure_of",
]
