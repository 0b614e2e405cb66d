# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Builder scopes: name-based invocation against an arbitrary target.

	def configure_project(s):
		s("apply", plugin="java")
		s.nested("dependencies", lambda deps: deps.implementation("lib:1.0"))
		return "done"

	with_builder(project, configure_project)  # -> "done"

Each scope wraps one target (its `delegate`) and picks a dispatch strategy for
it once, at construction. Calls made through the scope are forwarded to the
target's native `invoke_method(name, args)` when it has one and to the method
of that name otherwise.

Nested blocks are passed to the target as a zero-argument closure. Whatever
delegate the target assigns to that closure before calling it becomes the
target of a fresh scope, and the block runs against that scope. The outer call
returns the target's answer; the block's own value only surfaces through the
target (or not at all).
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, TypeVar

from dynbridge.closures import Closure
from dynbridge.config import InteropConfig, default_config
from dynbridge.dispatch import DispatchCapability, describe_type, detect_capability, invoke_reflective

logger = logging.getLogger(__name__)

R = TypeVar("R")

Block = Callable[["BuilderScope"], Any]


def keyword_arguments(pairs: Iterable[Tuple[str, object]]) -> Dict[str, object]:
	"""Collapse (name, value) pairs into one mapping in order; later duplicates win."""
	mapping: Dict[str, object] = {}
	for key, value in pairs:
		if not isinstance(key, str):
			raise TypeError(f"keyword argument names must be str, got {type(key).__qualname__}")
		mapping[key] = value
	return mapping


def _call_arguments(arguments: Tuple[object, ...], keywords: Mapping[str, object]) -> Tuple[object, ...]:
	if keywords:
		return (keyword_arguments(keywords.items()),) + arguments
	return arguments


class BuilderScope:
	"""
	Invocation surface over a single target.

	`scope("name", *args, **kwargs)` and `scope.name(*args, **kwargs)` invoke
	method `name`; keyword arguments are collapsed into one dict passed first.
	`scope.nested("name", block, ...)` additionally passes a closure running
	`block` against a new scope.
	"""

	def __init__(self, target: object, config: Optional[InteropConfig] = None) -> None:
		self._config = config if config is not None else default_config()
		self.delegate = target
		self.capability = detect_capability(target, self._config.entry_point)

	@classmethod
	def of(cls, target: object, config: Optional[InteropConfig] = None) -> "BuilderScope":
		return cls(target, config)

	@property
	def config(self) -> InteropConfig:
		return self._config

	def invoke_method(self, name: str, args: Sequence[object]) -> Any:
		args = tuple(args)
		logger.log(
			logging.INFO if self._config.trace else logging.DEBUG,
			"invoke %s(%d arg(s)) on %s via %s",
			name,
			len(args),
			describe_type(self.delegate),
			self.capability.name,
		)
		if self.capability is DispatchCapability.NATIVE_DYNAMIC:
			return getattr(self.delegate, self._config.entry_point)(name, args)
		return invoke_reflective(self.delegate, name, args)

	def __call__(self, name: str, /, *arguments: object, **keyword_arguments: object) -> Any:
		return self.invoke_method(name, _call_arguments(arguments, keyword_arguments))

	def nested(self, name: str, block: Block, /, *arguments: object, **keyword_arguments: object) -> Any:
		args = _call_arguments(arguments, keyword_arguments) + (self.closure_for(block),)
		return self.invoke_method(name, args)

	def closure_for(self, block: Block) -> Closure:
		return _BuilderClosure(block, self)

	def __getattr__(self, name: str) -> Any:
		if name.startswith("_"):
			raise AttributeError(name)
		if name == self._config.entry_point:
			return self.invoke_method
		return functools.partial(self, name)

	def __repr__(self) -> str:
		return f"BuilderScope({describe_type(self.delegate)}, {self.capability.name})"


class _BuilderClosure(Closure):
	"""Runs a nested block against a scope over the closure's current delegate."""

	def __init__(self, block: Block, scope: BuilderScope) -> None:
		super().__init__(scope, scope)
		self.block = block
		self.config = scope.config

	def do_call(self) -> Any:
		return with_builder(self.delegate, self.block, self.config)


def with_builder(target: object, block: Callable[[BuilderScope], R], config: Optional[InteropConfig] = None) -> R:
	"""Run `block` with a builder scope over `target`; returns the block's value."""
	return block(BuilderScope(target, config))


__all__ = ["BuilderScope", "with_builder", "keyword_arguments"]
