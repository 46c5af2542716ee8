"""String and byte utilities: splitting and ASCII case mapping, hex and base64 codecs, MD5, SHA-1, AES-128 and binary packing."""

__version__ = "0.1.0"

__all__ = ["aes128", "base64codec", "core", "errors", "hexcodec", "md5", "pack", "sha1"]