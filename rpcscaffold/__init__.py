"""rpcscaffold -- generates and incrementally updates OpenRPC servers.

Stub files written for each method keep their hand-written bodies across
regenerations; only each stub's signature line, the method index, the
routing table and the typings are rewritten.

Quick usage::

    from rpcscaffold import GeneratorConfig, generate_server

    config = GeneratorConfig(output_dir=Path("./my-server"))
    report = await generate_server("openrpc.json", config)
"""

from rpcscaffold.config import ComponentConfig, GeneratorConfig, UnmatchedSignaturePolicy
from rpcscaffold.generator import GenerationReport, ServerGenerator, generate_server

__all__ = [
    "ComponentConfig",
    "GenerationReport",
    "GeneratorConfig",
    "ServerGenerator",
    "UnmatchedSignaturePolicy",
    "generate_server",
]
