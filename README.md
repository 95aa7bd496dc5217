# ziesha

Building blocks for a small proof-of-work ledger, as a plain Python library.

## What is inside

- `ziesha.money`: `Money`, an amount counted in the smallest unit, with nine
  decimal places per coin. `Money.parse(" 123.456 ")` reads a decimal
  string. `str(money)` prints the amount with trailing zeros trimmed and the
  coin symbol `ℤ` appended. Bad input raises `ParseMoneyError`. Amounts
  support `+`, `-`, `//` by an integer and `int()`. Amounts stay within
  0 to 2**64 - 1, and results outside that range raise `OverflowError`.
- `ziesha.hashing`: `sha3_hash(data)`, the 32-byte SHA3-256 digest used
  everywhere else.
- `ziesha.merkle`: `MerkleTree(leaves)` over 32-byte hashes, with `root()`,
  `depth()`, `num_leaves()` and `prove(leaf)`. An empty tree has an all-zero
  root. A proof is checked by folding the leaf with each entry through
  `merge_hash(a, b)`, which puts the smaller input first before hashing.
- `ziesha.ed25519`: deterministic key pairs from a seed via
  `generate_keys(seed)`, plus `sign` and `verify`. `PublicKey` prints as
  `0x` followed by 64 hex digits in reversed byte order and is read back
  with `PublicKey.parse`. A malformed key raises `ParsePublicKeyError`.
  `PrivateKey.public_key()` gives the matching public key.
- `ziesha.address`: `Address`, which is either `Address.treasury()` or the
  holder of an Ed25519 public key. `Address.parse` reads a public-key
  address and raises `ParseAddressError` on bad input. The module also
  holds the `Account` (balance and nonce) and `ZkAccount` (nonce) records.
- `ziesha.kvstore`: the `KvStore` interface (`get`, `update`, `pairs`,
  `checksum`, `mirror`) with `Put` and `Remove` write operations. It
  provides an in-memory `RamKvStore` and `RamMirrorKvStore`, a layer that
  collects writes on top of another store. That layer can turn its writes
  into operations with `to_ops()` or into their undo with `rollback()`.
  Failures raise `KvStoreError`.
- `ziesha.diskstore`: `DiskKvStore(path)`, the same interface persisted in
  an SQLite file inside the directory `path`. The directory is created when
  missing. Use the store as a context manager, or call `close()`.
- `ziesha.keys`: the database key layout. For example, `block(7)` gives
  `BLK-0000000007`, `account(address)` gives `ACC-<address>`, and
  `local_value(...)` builds per-contract keys.

## Example

```python
from ziesha.ed25519 import generate_keys, sign, verify
from ziesha.kvstore import Put, RamKvStore
from ziesha.money import Money

pair = generate_keys(b"secret")
signature = sign(pair[1], b"hello")
assert verify(pair[0], b"hello", signature)

print(Money.parse("1.5"))   # 1.5ℤ

store = RamKvStore()
mirror = store.mirror()
mirror.update([Put("aa", b"\x01")])
store.update(mirror.to_ops())
assert store.get("aa") == b"\x01"
```

## What it does not do

The library provides these primitives only. It has none of the following:

- no node
- no networking or peer client
- no wallet
- no command-line program
- no block, header or transaction types
- no proof-of-work check
- no zero-knowledge signatures or contract state

The keys in `ziesha.keys` describe where such data would be stored. Nothing
in the package writes data under them.

## Tests

```
pip install -e .[test]
pytest
```