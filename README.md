# mqkit

A small collection of utilities for services. Everything is a library; there is
no command-line program.

## Modules

- `mqkit.base62`: `int_to_base62(number)` and `base62_to_int(text)`. Digits run
  from least to most significant; zero encodes as `"0"`.
- `mqkit.params_bytes`: byte packing. Booleans as one byte; 32- and 64-bit
  signed integers big-endian (`int32_to_bytes`, `bytes_to_int64`, ...); 32- and
  64-bit floats little-endian (`float32_to_bytes`, `bytes_to_float64`, ...);
  dicts as compact JSON with sorted keys (`map_to_bytes`, `bytes_to_map`,
  `map_to_bytes_string`, `bytes_to_map_string`, the last two checking that
  every value is a string).
- `mqkit.minifmt.sprintf(template, extra)`: replaces `{name}` placeholders with
  values from a mapping; unknown names are left in place.
- `mqkit.randint.rand_int64(low, high)`: a random integer in `[low, high)`, or
  `high` when `low >= high`.
- `mqkit.ringqueue.Queue`: a FIFO queue with `add`, `peek`, `get(index)`
  (negative indices count from the end), `remove` and `len()`. Empty-queue and
  out-of-range access raise `IndexError`. Not thread-safe.
- `mqkit.safemap.SafeMap`: a lock-protected dict with `get`, `set`, `check`,
  `delete`, `delete_all` and `items` (a copy). `set` returns `False` when the
  key already holds an equal value.
- `mqkit.idgen`: random 64-bit IDs taken from an AES-128-CTR keystream with a
  random key and counter. `generate_id()` is thread-safe. `ID` is an `int`
  whose `str()` is 16 lowercase hex digits; `ID.to_json()` gives that as a JSON
  string. `parse_id(text)` reads hex digits; `id_from_json(data)` accepts a JSON
  hex string or unsigned integer and raises `ValueError` otherwise.
- `mqkit.uuidtool`: `random_uuid()` makes a version 4 `UUID`; `parse_uuid(text)`
  accepts the dashed form, plain 32 hex digits or the braced form. `UUID.hex()`
  returns `xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`.
- `mqkit.aescipher.AesEncrypt(key)`: AES-CFB. The key must be at least 16 bytes;
  the first 32, 24 or 16 bytes are used (the longest that fits) and the IV is
  the first 16 bytes of that key. `encrypt(message)` returns bytes,
  `decrypt(data)` returns text.
- `mqkit.jsonutil.getter(call)`: calls a function returning text and decodes it
  as JSON.
- `mqkit.iptool`: `check_ip`, `inet_aton`, `inet_ntoa`, `is_inner_ip` (10/8,
  172.16/12, 192.168/16, 100.64/10 and 127/8),
  `get_global_ip_from_xforwarded_for`, and `real_ip(remote_addr, headers)`,
  which prefers a public remote address and otherwise the first public address
  in `X-Forwarded-For`.
- `mqkit.addr`: `extract(address)` returns the address given, or, for `""`,
  `"0.0.0.0"` or `"[::]"`, a private IPv4 address of this host (raising
  `OSError` if none); `ips()` lists all IPv4 addresses of this host.
- `mqkit.structs`: reflection over dataclass instances.
  - `mqkit.structs.tags`: `parse_tag(tag)` splits `"name,opt,opt"` into a name
    and `TagOptions`, whose `has(option)` tests membership.
  - `mqkit.structs.field`: `Field` gives one field by name, with `value`, `set`,
    `zero`, `is_zero`, `kind`, `tag`, `is_exported`, `is_embedded` and access to
    nested fields; `get_fields` and `struct_value`; errors `NotExportedError`
    and `NotSettableError`.
  - `mqkit.structs.core`: `Struct` and the shorthands `to_map`, `fill_map`,
    `values`, `fields`, `names`, `is_zero`, `has_zero`, `is_struct` and `name`.

  Tags live in field metadata under the tag name (`"structs"` by default, set
  via `Struct.tag_name`). Supported options are `-`, `omitempty`, `omitnested`,
  `flatten` and `string`. Fields whose names start with an underscore count as
  unexported; metadata `"embedded": True` marks an embedded field whose own
  fields can be looked up through the outer one.

## Examples

```python
from mqkit.base62 import int_to_base62, base62_to_int

int_to_base62(1006)      # "eg"
base62_to_int("eg")      # 1006
```

```python
from mqkit.ringqueue import Queue

q = Queue()
q.add("a")
q.add("b")
q.peek()      # "a"
q.remove()    # "a"
len(q)        # 1
```

```python
from mqkit.iptool import is_inner_ip, get_global_ip_from_xforwarded_for

is_inner_ip("192.168.0.2")                                    # True
get_global_ip_from_xforwarded_for("10.0.0.1, 202.106.9.134")  # "202.106.9.134"
```

```python
from mqkit.aescipher import AesEncrypt

key = "placeholder" * 2
cipher = AesEncrypt(key)
data = cipher.encrypt("hello")
cipher.decrypt(data)     # "hello"
```

```python
from dataclasses import dataclass, field
from mqkit.structs.core import to_map

@dataclass
class Server:
    name: str = field(default="", metadata={"structs": "server_name"})
    port: int = field(default=0, metadata={"structs": ",omitempty"})

to_map(Server(name="alpha"))   # {"server_name": "alpha"}
```

## What it does not do

`real_ip` works on a remote address string and a header mapping; it does not
plug into any web framework's request object. The package has no command-line
entry point.

## Tests

```
pip install -e ".[test]"
pytest
```