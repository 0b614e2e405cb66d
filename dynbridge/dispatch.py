# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Dispatch strategy selection and reflective method lookup.

A target either offers a native dynamic entry point, `invoke_method(name, args)`,
which resolves the method itself at call time, or it is an ordinary object whose
methods we find by name. The choice is a pure function of the target's shape,
so callers compute it once (see `BuilderScope`) and reuse the tag.

Reflective lookup rules:
- The attribute must be named exactly `name`, be public and callable.
- Its signature must bind the positional arguments (arity check).
- Each argument must match the parameter's annotation where one is present
  and checkable; `Mapping[str, Any]` accepts mappings, `X | None` accepts None.
"""

from __future__ import annotations

import inspect
import logging
import types
import typing
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Tuple, runtime_checkable

from dynbridge.config import DEFAULT_ENTRY_POINT
from dynbridge.errors import MethodNotFound

logger = logging.getLogger(__name__)

_MISSING = object()


class DispatchCapability(Enum):
	NATIVE_DYNAMIC = auto()
	REFLECTIVE = auto()


@runtime_checkable
class DynamicObject(Protocol):
	"""
	Objects that resolve and invoke methods by name themselves.

	Describes the default entry point for type checkers and isinstance checks;
	`detect_capability` probes the configured entry-point name directly, so it
	also recognizes targets whose entry point is not called invoke_method.
	"""

	def invoke_method(self, name: str, args: Sequence[object]) -> object:
		...


def _signature_binds(fn: Callable[..., Any], args: Sequence[object]) -> Optional[bool]:
	"""True/False when the signature is known, None when it cannot be introspected."""
	try:
		sig = inspect.signature(fn)
	except (TypeError, ValueError):
		return None
	try:
		sig.bind(*args)
	except TypeError:
		return False
	return True


def detect_capability(target: object, entry_point: str = DEFAULT_ENTRY_POINT) -> DispatchCapability:
	"""
	Decide how methods on `target` are invoked.

	NATIVE_DYNAMIC when `target.<entry_point>` is callable with a method name and
	an argument sequence; REFLECTIVE otherwise.
	"""
	capability = DispatchCapability.REFLECTIVE
	if target is not None:
		entry = getattr(target, entry_point, None)
		if callable(entry) and _signature_binds(entry, (entry_point, ())) is not False:
			capability = DispatchCapability.NATIVE_DYNAMIC
	logger.debug("dispatch capability of %s: %s", type(target).__qualname__, capability.name)
	return capability


def describe_type(value: object) -> str:
	cls = type(value)
	if cls.__module__ == "builtins":
		return cls.__qualname__
	return f"{cls.__module__}.{cls.__qualname__}"


def _type_hints(method: Callable[..., Any]) -> Dict[str, Any]:
	func = getattr(method, "__func__", method)
	if not inspect.isfunction(func):
		return {}
	try:
		return typing.get_type_hints(func)
	except (NameError, TypeError, SyntaxError, AttributeError):
		# Unresolvable or malformed forward references; fall back to the raw annotations.
		return {}


# int is acceptable where float is expected, int and float where complex is.
_NUMERIC_PROMOTIONS: Dict[type, Tuple[type, ...]] = {float: (int,), complex: (int, float)}


def _matches(hint: Any, value: object) -> bool:
	if hint is inspect.Parameter.empty or hint is Any or isinstance(hint, str):
		return True
	if hint is None or hint is type(None):
		return value is None
	origin = typing.get_origin(hint)
	if origin is typing.Union or origin is types.UnionType:
		return any(_matches(arg, value) for arg in typing.get_args(hint))
	if origin is not None:
		hint = origin
	if isinstance(hint, type):
		if isinstance(value, _NUMERIC_PROMOTIONS.get(hint, ())):
			return True
		try:
			return isinstance(value, hint)
		except TypeError:
			# Non-runtime-checkable protocols and similar.
			return True
	return True


def _arguments_match(method: Callable[..., Any], args: Sequence[object]) -> bool:
	try:
		sig = inspect.signature(method)
	except (TypeError, ValueError):
		return True
	try:
		bound = sig.bind(*args)
	except TypeError:
		return False
	hints = _type_hints(method)
	for pname, value in bound.arguments.items():
		param = sig.parameters[pname]
		hint = hints.get(pname, param.annotation)
		if param.kind is inspect.Parameter.VAR_POSITIONAL:
			if not all(_matches(hint, v) for v in value):
				return False
		elif not _matches(hint, value):
			return False
	return True


def find_method(target: object, name: str, args: Sequence[object]) -> Callable[..., Any]:
	"""Return the bound method `name` of `target` that accepts `args`, or raise MethodNotFound."""
	method = _MISSING
	if not name.startswith("_"):
		method = getattr(target, name, _MISSING)
	if method is _MISSING or not callable(method) or not _arguments_match(method, args):
		raise MethodNotFound(name, describe_type(target), [describe_type(a) for a in args])
	return method


def invoke_reflective(target: object, name: str, args: Sequence[object]) -> Any:
	"""Find `name` on `target` and call it with `args`; errors it raises propagate."""
	return find_method(target, name, args)(*args)


__all__ = [
	"DispatchCapability",
	"DynamicObject",
	"detect_capability",
	"describe_type",
	"find_method",
	"invoke_reflective",
]
