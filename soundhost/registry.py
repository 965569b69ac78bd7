"""Registry of the audio host APIs known to this process.

Backends register their host class under a :class:`HostId`. The functions
here list them, report which ones can be used on this system and create
dynamically dispatched :class:`Host` values from them.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

from soundhost.dispatch import Host, HostId
from soundhost.traits import HostTrait

_HOSTS: dict[HostId, type[HostTrait]] = {}

_PLATFORM_DEFAULTS: tuple[tuple[tuple[str, ...], HostId], ...] = (
    (("linux", "dragonfly", "freebsd", "netbsd"), HostId.ALSA),
    (("darwin", "ios"), HostId.COREAUDIO),
    (("win32", "cygwin"), HostId.WASAPI),
    (("emscripten",), HostId.EMSCRIPTEN),
    (("android",), HostId.AAUDIO),
)


class HostUnavailable(Exception):
    """The requested host is not available on this system."""

    def __init__(self, host_id: Optional[HostId] = None) -> None:
        self.host_id = host_id
        if host_id is None:
            message = "the requested host is unavailable"
        else:
            message = f"the requested host {host_id} is unavailable"
        super().__init__(message)


def _as_host_id(host_id: Union[HostId, str]) -> HostId:
    if isinstance(host_id, HostId):
        return host_id
    try:
        return HostId(host_id)
    except ValueError:
        try:
            return HostId[str(host_id).upper()]
        except KeyError:
            raise ValueError(f"unknown host id: {host_id!r}") from None


def register_host(host_id: Union[HostId, str], host_class: type[HostTrait]) -> None:
    """Register ``host_class`` as the implementation of ``host_id``.

    Registering an id again replaces its class but keeps its position.
    """
    if not (isinstance(host_class, type) and issubclass(host_class, HostTrait)):
        raise TypeError("host_class must be a HostTrait subclass")
    _HOSTS[_as_host_id(host_id)] = host_class


def all_hosts() -> list[HostId]:
    """Every registered host id, in registration order."""
    return list(_HOSTS)


def any_host_available() -> bool:
    """True if at least one registered host can be used on this system."""
    return any(host_class.is_available() for host_class in _HOSTS.values())


def available_hosts() -> list[HostId]:
    """Registered hosts that are currently available, in registration order."""
    return [host_id for host_id, host_class in _HOSTS.items() if host_class.is_available()]


def host_from_id(host_id: Union[HostId, str]) -> Host:
    """Create the host identified by ``host_id``.

    Raises :class:`HostUnavailable` if it is not registered or not available.
    """
    ident = _as_host_id(host_id)
    host_class = _HOSTS.get(ident)
    if host_class is None or not host_class.is_available():
        raise HostUnavailable(ident)
    return Host(ident, host_class())


def _default_host_id(platform: str) -> HostId:
    for prefixes, host_id in _PLATFORM_DEFAULTS:
        if platform.startswith(prefixes):
            return host_id
    return HostId.NULL


def default_host() -> Host:
    """The default host for the platform this process runs on.

    Raises :class:`HostUnavailable` if that host cannot be created.
    """
    return host_from_id(_default_host_id(sys.platform))