# soundhost

Abstract interfaces for audio hosts, the devices they expose and the
streams built on those devices; a description of the sample formats audio
data can come in; and a registry that picks a host backend at run time.

## Installation

```
pip install soundhost
```

The package has no runtime dependencies.

## Sample formats

`soundhost.sample_format.SampleFormat` is an enum of the supported
encodings: `I8`, `I16`, `I24`, `I32`, `I64`, `U8`, `U16`, `U32`, `U64`,
`F32`, `F64`. Each member's value is its short name (`"i16"`, `"f32"`, ...),
and members are ordered in the order listed.

```python
from soundhost.sample_format import SampleFormat

fmt = SampleFormat.I24
fmt.sample_size()    # 4: a 24-bit sample is stored in 4 bytes
fmt.is_int()         # True  (signed integer)
fmt.is_uint()        # False (unsigned integer)
fmt.is_float()       # False
str(fmt)             # "i24"
SampleFormat("f32")  # SampleFormat.F32
SampleFormat.I8 < SampleFormat.F64   # True
```

## Hosts, devices and streams

`soundhost.traits` defines three abstract base classes that a backend
implements:

- `HostTrait`: the classmethod `is_available()`, `devices()`,
  `default_input_device()` and `default_output_device()` (each `None` when
  there is no such device). `input_devices()` and `output_devices()` are
  provided: they yield the devices whose `supports_input()` /
  `supports_output()` is true.
- `DeviceTrait`: `name()`, `supported_input_configs()`,
  `supported_output_configs()`, `default_input_config()`,
  `default_output_config()`, `build_input_stream_raw(...)` and
  `build_output_stream_raw(...)`. `supports_input()` and `supports_output()`
  are provided: true when the device lists at least one configuration,
  false when it lists none or listing raises.
- `StreamTrait`: `play()` and `pause()`.

`DeviceTrait.build_input_stream(config, sample_format, data_callback,
error_callback, timeout=None)` and `build_output_stream(...)` accept a
`SampleFormat` or its value string, and hand the backend's `_raw` method a
data callback that raises `TypeError("host supplied incorrect sample type")`
when the data passed to it has a `sample_format` attribute that differs from
the requested one.

### A minimal backend

```python
from soundhost.traits import DeviceTrait, HostTrait, StreamTrait

class SilentStream(StreamTrait):
    def play(self): pass
    def pause(self): pass

class SilentDevice(DeviceTrait):
    def name(self): return "silent"
    def supported_input_configs(self): return []
    def supported_output_configs(self): return ["stereo"]
    def default_input_config(self): raise LookupError("no input")
    def default_output_config(self): return "stereo"
    def build_input_stream_raw(self, config, sample_format, data_callback,
                               error_callback, timeout=None):
        raise LookupError("no input")
    def build_output_stream_raw(self, config, sample_format, data_callback,
                                error_callback, timeout=None):
        return SilentStream()

class SilentHost(HostTrait):
    @classmethod
    def is_available(cls): return True
    def devices(self): return iter([SilentDevice()])
    def default_input_device(self): return None
    def default_output_device(self): return SilentDevice()
```

## Dynamic dispatch

`soundhost.dispatch` wraps any backend in common types, each tagged with the
`HostId` of the backend it came from:

- `HostId`: `JACK`, `ALSA`, `COREAUDIO`, `EMSCRIPTEN`, `WEBAUDIO`, `ASIO`,
  `WASAPI`, `AAUDIO`, `NULL`. `display_name()` and `str()` give the
  human-readable name (`"CoreAudio"`, `"WASAPI"`, ...).
- `Host(host_id, inner)`: `id()` returns the `HostId`; `devices()`,
  `default_input_device()` and `default_output_device()` return `Device`
  wrappers. The classmethod `Host.is_available()` is true when any
  registered host is available.
- `Device(host_id, inner)`: forwards every query to the wrapped device; the
  stream builders return `Stream` wrappers.
- `Stream(host_id, inner)`: forwards `play()` and `pause()`.

## Choosing a host

`soundhost.registry` keeps the backends known to the process:

```python
from soundhost import registry
from soundhost.dispatch import HostId

registry.register_host(HostId.NULL, SilentHost)

registry.all_hosts()          # [HostId.NULL], in registration order
registry.available_hosts()    # registered hosts whose is_available() is true
registry.any_host_available() # True
host = registry.host_from_id("Null")
device = host.default_output_device()
stream = device.build_output_stream("stereo", "f32", lambda data, info: None, print)
stream.play()
```

- `register_host(host_id, host_class)` takes a `HostTrait` subclass (anything
  else raises `TypeError`). Registering an id again replaces its class but
  keeps its position.
- A host id may be given as a `HostId`, its value (`"CoreAudio"`) or its
  member name in any case (`"coreaudio"`); anything else raises
  `ValueError`.
- `host_from_id(host_id)` raises `registry.HostUnavailable` when the id is
  not registered or its class reports it is not available.
- `default_host()` picks the host for `sys.platform`: `ALSA` on Linux and
  the BSDs, `COREAUDIO` on macOS and iOS, `WASAPI` on Windows, `EMSCRIPTEN`,
  `AAUDIO` on Android, and `NULL` otherwise, then calls `host_from_id`.

## What this package does not do

No backend is included. Nothing here talks to a sound card or an operating
system audio API: the registry starts empty, so `default_host()` raises
`HostUnavailable` until a backend has been registered for the platform's
host id. Configurations and callback data are whatever objects a backend
chooses to use; the package defines no types for them.

## Running the tests

```
pip install -e .[test]
pytest
```