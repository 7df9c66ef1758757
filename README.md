# tlproto

Building blocks for MTProto clients:

- **AES-256-IGE** encryption as used by the protocol (`tlproto.ige`,
  `tlproto.aes`), including the temporary keys derived during the
  Diffie–Hellman key exchange.
- A parser for **TL schema** text (`tlproto.tl_parser`, with the data model in
  `tlproto.tl_schema` and the character reader in `tlproto.tl_cursor`) and
  helpers that group the parsed constructors into enums, single types and
  interfaces (`tlproto.gen_schema`, `tlproto.naming`).
- Descriptions of server **RPC error names** starting with a digit or with
  A to M (`tlproto.rpc_messages_am.MESSAGES`).

## Installation

```
pip install .
```

## AES-256-IGE

```python
from tlproto.ige import ige_encrypt, ige_decrypt

key = bytes(32)
iv = bytes(32)
ciphertext = ige_encrypt(b"\x00" * 32, key, iv)
assert ige_decrypt(ciphertext, key, iv) == b"\x00" * 32
```

Data must be at least one block long and a multiple of 16 bytes; otherwise
`DataTooSmallError` or `DataNotDivisibleError` (both subclasses of `IgeError`)
is raised. `IgeCipher` keeps its chaining state between calls to `encrypt` and
`decrypt`; `generate_aes_ige(msg_key, auth_key, decode)` derives the AES key and
IV from a message key and an authorization key of at least 128 (or 136 when
decoding) bytes.

Message-level helpers live in `tlproto.aes`:

- `message_key(msg)` – bytes 4 to 20 of the SHA-1 of the message.
- `encrypt(msg, key)` / `decrypt(msg, key, check_data)` – encryption with an
  authorization key; `encrypt` pads the message with zero bytes to whole blocks.
- `generate_temp_keys(nonce_second, nonce_server)` – the temporary key and IV
  built from the two nonces (given as integers).
- `encrypt_message_with_temp_keys` prefixes the message with its SHA-1, pads it
  with random bytes and encrypts it; `encrypt_raw_with_temp_keys` encrypts an
  already padded message; `decrypt_message_with_temp_keys` decrypts and strips
  the hash and padding, raising `ValueError` if no prefix matches the hash.

## Parsing a TL schema

```python
from tlproto.tl_parser import parse_schema
from tlproto.gen_schema import create_internal_schema

schema = parse_schema("""
ipPort#d433ad73 ipv4:int port:int = IpPort;
---functions---
help.getConfig#c4f9186b = Config;
""")
print(schema.objects[0].name)   # ipPort
print(schema.methods[0].name)   # help.getConfig

internal = create_internal_schema(schema)
print(internal.single_interface_types[0].name)  # ipPort
```

The parser understands `---types---` / `---functions---` sections, `flags.N?`
optional parameters, `Vector<...>` types and `// @type`, `// @constructor`,
`// @enum`, `// @method` and `// @param` comments. Built-in definitions such
as `int`, `boolTrue` or `invokeWithLayer` are skipped. Malformed text raises
`SchemaParseError`.

`InternalSchema.all_constructors()` lists the generated names of all
constructors and enum values, and `InternalSchema.go_type(type_name)` maps a
schema type to the generated type name. `tlproto.naming.goify` turns schema
names such as `help.getConfig` into `HelpGetConfig`, writing words like `id`,
`api` and `url` fully upper case.

## RPC error descriptions

```python
from tlproto.rpc_messages_am import MESSAGES

print(MESSAGES["FLOOD_WAIT_X"].format(30))  # A wait of 30 seconds is required
```

Names ending in or containing `X` stand for errors that carry a value; their
text holds a single `{}` placeholder.

## What this package does not do

- It does not connect to servers, run the key-exchange handshake or keep
  sessions; it only provides the encryption and key derivation pieces.
- It parses and groups TL schemas but does not write generated code to files.
- It does not turn RPC errors into exceptions, and its error descriptions cover
  only names starting with a digit or with A to M.

## Running the tests

```
pip install .[test]
pytest
```