"""
Descriptor checksum library and service.

Computes and verifies the 8-character checksum appended to wallet output
descriptors ("<descriptor>#<checksum>"), and polls address validators when
new addresses are issued from a checksummed descriptor.
"""

__version__ = "1.0.0"
