# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Delegate-first execution of closures handed to a dynamic target.

A target that receives a configuration closure typically wants to run it
against some object of its own. These helpers do that without touching the
caller's closure: the closure is shallow-copied, the copy gets the delegate,
and it is called with the delegate as argument only if it takes one.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Optional, TypeVar

from dynbridge.closures import Closure

logger = logging.getLogger(__name__)

T = TypeVar("T")


def configure(closure: Closure, delegate: T) -> T:
	"""Run `closure` against `delegate` and return the delegate."""
	configured = copy.copy(closure)
	configured.set_delegate(delegate)
	logger.debug("configuring %s with %r", configured, type(delegate).__qualname__)
	if configured.maximum_number_of_parameters == 0:
		configured.call()
	else:
		configured.call(delegate)
	return delegate


def configure_using(closure: Optional[Closure]) -> Callable[[Any], None]:
	"""
	Turn `closure` into a one-argument action applying it to each delegate.

	A None closure yields an action that does nothing.
	"""

	def execute(delegate: Any) -> None:
		if closure is not None:
			configure(closure, delegate)

	return execute


__all__ = ["configure", "configure_using"]
