"""OpenRPC interface descriptions.

Usage::

    from rpcscaffold.openrpc import load_document

    document = await load_document("openrpc.json")
    print(document.info.title, document.method_names())
"""

from rpcscaffold.openrpc.loader import load_document
from rpcscaffold.openrpc.models import (
    ContentDescriptor,
    Example,
    ExamplePairing,
    Info,
    Method,
    OpenRPCDocument,
)

__all__ = [
    "load_document",
    "ContentDescriptor",
    "Example",
    "ExamplePairing",
    "Info",
    "Method",
    "OpenRPCDocument",
]
