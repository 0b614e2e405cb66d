# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Process-wide settings for dynamic dispatch.

Settings come from the environment with module-level defaults:

  DYNBRIDGE_ENTRY_POINT  name of the native dynamic entry point (default: invoke_method)
  DYNBRIDGE_TRACE        log each dispatch at INFO instead of DEBUG (1/true/yes/on)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ENTRY_POINT = "invoke_method"

ENV_ENTRY_POINT = "DYNBRIDGE_ENTRY_POINT"
ENV_TRACE = "DYNBRIDGE_TRACE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class InteropConfig:
	entry_point: str = DEFAULT_ENTRY_POINT
	trace: bool = False

	def __post_init__(self) -> None:
		if not self.entry_point.isidentifier():
			raise ValueError(f"invalid dynamic entry point name: {self.entry_point!r}")

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "InteropConfig":
		env = os.environ if environ is None else environ
		entry_point = env.get(ENV_ENTRY_POINT) or DEFAULT_ENTRY_POINT
		trace = env.get(ENV_TRACE, "").strip().lower() in _TRUTHY
		return cls(entry_point=entry_point, trace=trace)


_DEFAULT: Optional[InteropConfig] = None


def default_config() -> InteropConfig:
	"""Return the environment-derived config, read once per process."""
	global _DEFAULT
	if _DEFAULT is None:
		_DEFAULT = InteropConfig.from_env()
	return _DEFAULT


__all__ = ["InteropConfig", "default_config", "DEFAULT_ENTRY_POINT"]
