"""AES-256-IGE encryption, TL schema parsing and RPC error descriptions for MTProto."""

__version__ = "0.1.0"

__all__ = [
    "aes",
    "gen_schema",
    "ige",
    "naming",
    "rpc_messages_am",
    "tl_cursor",
    "tl_parser",
    "tl_schema",
]