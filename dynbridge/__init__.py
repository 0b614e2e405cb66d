# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
dynbridge: calling fixed-arity Python callables through a dynamic closure
convention, and driving arbitrary objects through name-based builder scopes.

Modules:
  closures   untyped closures and the FunctionClosureN / delegate adapters
  dispatch   native-vs-reflective capability detection, reflective lookup
  configure  delegate-first execution of closures handed to a target
  builder    BuilderScope and with_builder
"""

import logging

from dynbridge.builder import BuilderScope, keyword_arguments, with_builder
from dynbridge.closures import (
	Closure,
	DelegateClosure,
	FunctionClosure0,
	FunctionClosure1,
	FunctionClosure2,
	FunctionClosure3,
	closure_of,
	delegate_closure_of,
)
from dynbridge.config import InteropConfig
from dynbridge.configure import configure, configure_using
from dynbridge.dispatch import DispatchCapability, DynamicObject, detect_capability, invoke_reflective
from dynbridge.errors import ArityMismatch, InteropError, MethodNotFound

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
	"BuilderScope",
	"with_builder",
	"keyword_arguments",
	"Closure",
	"DelegateClosure",
	"FunctionClosure0",
	"FunctionClosure1",
	"FunctionClosure2",
	"FunctionClosure3",
	"closure_of",
	"delegate_closure_of",
	"InteropConfig",
	"configure",
	"configure_using",
	"DispatchCapability",
	"DynamicObject",
	"detect_capability",
	"invoke_reflective",
	"ArityMismatch",
	"InteropError",
	"MethodNotFound",
]
