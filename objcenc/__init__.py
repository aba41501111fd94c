"""Objective-C type encodings, runtime selection and block ABI constants."""

__version__ = "0.1.0"
__all__ = ["encoding", "encode", "known_types", "runtime", "platform_types", "blocks"]