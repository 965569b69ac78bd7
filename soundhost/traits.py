"""Abstract interfaces for audio hosts, devices and streams."""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from soundhost.sample_format import SampleFormat

DataCallback = Callable[[Any, Any], None]
ErrorCallback = Callable[[Exception], None]


class StreamTrait(abc.ABC):
    """A stream created by a device, with playback control."""

    @abc.abstractmethod
    def play(self) -> None:
        """Run the stream. Not every host starts a stream on creation."""

    @abc.abstractmethod
    def pause(self) -> None:
        """Pause the stream; raises if the device cannot pause."""


def _checked(data_callback: DataCallback, expected: SampleFormat) -> DataCallback:
    def callback(data: Any, info: Any) -> None:
        actual = getattr(data, "sample_format", None)
        if actual is not None and actual != expected:
            raise TypeError("host supplied incorrect sample type")
        data_callback(data, info)

    return callback


class DeviceTrait(abc.ABC):
    """A device capable of audio input and/or output.

    Devices may be disconnected at any time, so queries may raise.
    """

    @abc.abstractmethod
    def name(self) -> str:
        """Human-readable name of the device."""

    def supports_input(self) -> bool:
        """True if the device offers at least one input configuration."""
        try:
            configs = self.supported_input_configs()
        except Exception:
            return False
        return next(iter(configs), None) is not None

    def supports_output(self) -> bool:
        """True if the device offers at least one output configuration."""
        try:
            configs = self.supported_output_configs()
        except Exception:
            return False
        return next(iter(configs), None) is not None

    @abc.abstractmethod
    def supported_input_configs(self) -> Iterable[Any]:
        """Input configuration ranges the device supports."""

    @abc.abstractmethod
    def supported_output_configs(self) -> Iterable[Any]:
        """Output configuration ranges the device supports."""

    @abc.abstractmethod
    def default_input_config(self) -> Any:
        """Default input configuration of the device."""

    @abc.abstractmethod
    def default_output_config(self) -> Any:
        """Default output configuration of the device."""

    def build_input_stream(
        self,
        config: Any,
        sample_format: SampleFormat | str,
        data_callback: DataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create an input stream whose data must be in ``sample_format``."""
        fmt = SampleFormat(sample_format)
        return self.build_input_stream_raw(
            config, fmt, _checked(data_callback, fmt), error_callback, timeout
        )

    def build_output_stream(
        self,
        config: Any,
        sample_format: SampleFormat | str,
        data_callback: DataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create an output stream whose buffers must be in ``sample_format``."""
        fmt = SampleFormat(sample_format)
        return self.build_output_stream_raw(
            config, fmt, _checked(data_callback, fmt), error_callback, timeout
        )

    @abc.abstractmethod
    def build_input_stream_raw(
        self,
        config: Any,
        sample_format: SampleFormat,
        data_callback: DataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create a dynamically typed input stream."""

    @abc.abstractmethod
    def build_output_stream_raw(
        self,
        config: Any,
        sample_format: SampleFormat,
        data_callback: DataCallback,
        error_callback: ErrorCallback,
        timeout: Optional[float] = None,
    ) -> StreamTrait:
        """Create a dynamically typed output stream."""


class HostTrait(abc.ABC):
    """Access to the audio devices an audio API offers on this system."""

    @classmethod
    @abc.abstractmethod
    def is_available(cls) -> bool:
        """Whether this host can be used on the system."""

    @abc.abstractmethod
    def devices(self) -> Iterator[DeviceTrait]:
        """All devices currently available to the host."""

    @abc.abstractmethod
    def default_input_device(self) -> Optional[DeviceTrait]:
        """The default input device, or None if there is none."""

    @abc.abstractmethod
    def default_output_device(self) -> Optional[DeviceTrait]:
        """The default output device, or None if there is none."""

    def input_devices(self) -> Iterator[DeviceTrait]:
        """Devices that support at least one input configuration."""
        return (device for device in self.devices() if device.supports_input())

    def output_devices(self) -> Iterator[DeviceTrait]:
        """Devices that support at least one output configuration."""
        return (device for device in self.devices() if device.supports_output())