from dataclasses import dataclass, field

import pytest

from soundhost.sample_format import SampleFormat
from soundhost.traits import DeviceTrait, HostTrait, StreamTrait


@dataclass
class FakeData:
    sample_format: SampleFormat
    samples: list


class FakeStream(StreamTrait):
    def __init__(self, config, sample_format, data_callback, error_callback, timeout):
        self.config = config
        self.sample_format = sample_format
        self.data_callback = data_callback
        self.error_callback = error_callback
        self.timeout = timeout
        self.playing = False

    def play(self):
        self.playing = True

    def pause(self):
        self.playing = False


@dataclass
class FakeDevice(DeviceTrait):
    label: str
    inputs: list = field(default_factory=list)
    outputs: list = field(default_factory=list)
    broken: bool = False

    def name(self):
        return self.label

    def supported_input_configs(self):
        if self.broken:
            raise RuntimeError("device disconnected")
        return iter(self.inputs)

    def supported_output_configs(self):
        if self.broken:
            raise RuntimeError("device disconnected")
        return iter(self.outputs)

    def default_input_config(self):
        return self.inputs[0]

    def default_output_config(self):
        return self.outputs[0]

    def build_input_stream_raw(self, config, sample_format, data_callback, error_callback, timeout=None):
        return FakeStream(config, sample_format, data_callback, error_callback, timeout)

    def build_output_stream_raw(self, config, sample_format, data_callback, error_callback, timeout=None):
        return FakeStream(config, sample_format, data_callback, error_callback, timeout)


class FakeHost(HostTrait):
    def __init__(self, devices=None, fail=False):
        self._devices = devices or []
        self._fail = fail

    @classmethod
    def is_available(cls):
        return True

    def devices(self):
        if self._fail:
            raise RuntimeError("backend error")
        return iter(self._devices)

    def default_input_device(self):
        return next(self.input_devices(), None)

    def default_output_device(self):
        return next(self.output_devices(), None)


def test_abstract_classes_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DeviceTrait()
    with pytest.raises(TypeError):
        HostTrait()
    with pytest.raises(TypeError):
        StreamTrait()


def test_supports_input_and_output():
    device = FakeDevice("mic", inputs=["cfg"])
    assert DeviceTrait.supports_input(device) is True
    assert DeviceTrait.supports_output(device) is False


def test_broken_device_supports_nothing():
    device = FakeDevice("gone", inputs=["cfg"], outputs=["cfg"], broken=True)
    assert DeviceTrait.supports_input(device) is False
    assert DeviceTrait.supports_output(device) is False


def test_input_and_output_devices_filtered():
    mic = FakeDevice("mic", inputs=["cfg"])
    speaker = FakeDevice("speaker", outputs=["cfg"])
    both = FakeDevice("both", inputs=["cfg"], outputs=["cfg"])
    host = FakeHost([mic, speaker, both])
    assert [d.name() for d in HostTrait.input_devices(host)] == ["mic", "both"]
    assert [d.name() for d in HostTrait.output_devices(host)] == ["speaker", "both"]


def test_default_devices_via_filters():
    speaker = FakeDevice("speaker", outputs=["cfg"])
    host = FakeHost([speaker])
    assert next(HostTrait.output_devices(host), None) is speaker
    assert next(HostTrait.input_devices(host), None) is None
    assert host.default_output_device() is speaker
    assert host.default_input_device() is None


def test_devices_error_raised_eagerly():
    host = FakeHost(fail=True)
    with pytest.raises(RuntimeError):
        HostTrait.input_devices(host)
    with pytest.raises(RuntimeError):
        HostTrait.output_devices(host)


def test_build_input_stream_passes_arguments():
    device = FakeDevice("mic", inputs=["cfg"])
    errors = []
    stream = DeviceTrait.build_input_stream(
        device, "config", "i16", lambda d, i: None, errors.append, 1.5
    )
    assert stream.config == "config"
    assert stream.sample_format is SampleFormat.I16
    assert stream.timeout == 1.5
    assert stream.error_callback == errors.append


def test_build_input_stream_forwards_matching_data():
    device = FakeDevice("mic", inputs=["cfg"])
    received = []
    stream = DeviceTrait.build_input_stream(
        device,
        "config",
        SampleFormat.F32,
        lambda d, i: received.append((d.samples, i)),
        print,
        None,
    )
    stream.data_callback(FakeData(SampleFormat.F32, [0.5, -0.5]), "info")
    assert received == [([0.5, -0.5], "info")]


def test_build_output_stream_rejects_wrong_sample_type():
    device = FakeDevice("speaker", outputs=["cfg"])
    received = []
    stream = DeviceTrait.build_output_stream(
        device,
        "config",
        SampleFormat.I16,
        lambda d, i: received.append(d),
        print,
        None,
    )
    with pytest.raises(TypeError):
        stream.data_callback(FakeData(SampleFormat.F32, [0.0]), None)
    assert received == []


def test_build_stream_unknown_format():
    device = FakeDevice("speaker", outputs=["cfg"])
    with pytest.raises(ValueError):
        DeviceTrait.build_output_stream(
            device, "config", "q7", lambda d, i: None, print, None
        )


def test_stream_play_and_pause():
    device = FakeDevice("speaker", outputs=["cfg"])
    stream = DeviceTrait.build_output_stream(
        device, "config", "f32", lambda d, i: None, print, None
    )
    assert stream.sample_format is SampleFormat.F32
    stream.play()
    assert stream.playing is True
    stream.pause()
    assert stream.playing is False


def test_available_host_with_no_devices_lists_none():
    host = FakeHost()
    assert FakeHost.is_available() is True
    assert list(HostTrait.input_devices(host)) == []
    assert list(HostTrait.output_devices(host)) == []