"""Dynamically dispatched host, device and stream types.

These wrap a backend-specific implementation together with the identifier
of the backend it came from. This lets callers switch between audio APIs at
runtime while holding values of a single type.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from soundhost.sample_format import SampleFormat
from soundhost.traits import (
    DataCallback,
    DeviceTrait,
    ErrorCallback,
    HostTrait,
    StreamTrait,
)


class HostId(enum.Enum):
    """Unique identifier of an audio host API."""

    JACK = "JACK"
    ALSA = "ALSA"
    COREAUDIO = "CoreAudio"
    EMSCRIPTEN = "Emscripten"
    WEBAUDIO = "WebAudio"
    ASIO = "ASIO"
    WASAPI = "WASAPI"
    AAUDIO = "AAudio"
    NULL = "Null"

    def display_name(self) -> str:
        """Human-readable name of the host API."""
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Stream(StreamTrait):
    """A stream from any host, tagged with the host it belongs to."""

    host_id: HostId
    inner: StreamTrait

    def play(self) -> None:
        self.inner.play()

    def pause(self) -> None:
        self.inner.pause()


@dataclass(frozen=True)
class Device(DeviceTrait):
    """A device from any host, tagged with the host it belongs to."""

    host_id: HostId
    inner: DeviceTrait

    def name(self) -> str:
        return self.inner.name()

    def supports_input(self) -> bool:
        return self.inner.supports_input()

    def supports_output(self) -> bool:
        return self.inner.supports_output()

    def supported_input_configs(self) -> Iterator[Any]:
        return iter(self.inner.supported_input_configs())

    def supported_output_configs(self) -> Iterator[Any]:
        return iter(self.inner.supported_output_configs())

    def default_input_config(self) -> Any:
        return self.inner.default_input_config()

    def default_output_config(self) -> Any:
        return self.inner.default_output_config()

    def build_input_stream_raw(
        self,
        config: Any,
        sample_format: SampleFormat,
        data_callback: DataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> Stream:
        stream = self.inner.build_input_stream_raw(
            config, sample_format, data_callback, error_callback, timeout
        )
        return Stream(self.host_id, stream)

    def build_output_stream_raw(
        self,
        config: Any,
        sample_format: SampleFormat,
        data_callback: DataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> Stream:
        stream = self.inner.build_output_stream_raw(
            config, sample_format, data_callback, error_callback, timeout
        )
        return Stream(self.host_id, stream)


@dataclass(frozen=True)
class Host(HostTrait):
    """A host of any kind available on the platform."""

    host_id: HostId
    inner: HostTrait

    @classmethod
    def is_available(cls) -> bool:
        """True if at least one registered host is available."""
        from soundhost.registry import any_host_available

        return any_host_available()

    def id(self) -> HostId:
        """Identifier of the host API this host uses."""
        return self.host_id

    def _wrap(self, device: Optional[DeviceTrait]) -> Optional[Device]:
        if device is None:
            return None
        return Device(self.host_id, device)

    def devices(self) -> Iterator[Device]:
        inner_devices: Iterable[DeviceTrait] = self.inner.devices()
        return (Device(self.host_id, device) for device in inner_devices)

    def default_input_device(self) -> Optional[Device]:
        return self._wrap(self.inner.default_input_device())

    def default_output_device(self) -> Optional[Device]:
        return self._wrap(self.inner.default_output_device())