"""Audio engine core: formats, drivers, devices, channel buffers, stream parameters and stream control over a pluggable library wrapper."""

__version__ = "0.1.0"