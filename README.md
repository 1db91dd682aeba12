# latticekem

Building blocks in pure Python for a module-lattice key encapsulation mechanism
over the ring Z_q[X]/(X^256 + 1) with q = 3329.

## Modules

- `latticekem.params`: `KyberParams` and `params_for(k)` give the noise
  parameters and the sizes of every encoded object for k = 2, 3 or 4.
  Examples are `publickeybytes`, `secretkeybytes`, `ciphertextbytes`,
  `polyvecbytes` and `indcpa_bytes`. Any other `k` raises `ValueError`.
- `latticekem.reduce`: `montgomery_reduce` and `barrett_reduce` do modular
  reduction in 16-bit signed arithmetic.
- `latticekem.ntt`: the number-theoretic transform (`ntt`, `invntt`), the
  `ZETAS` table, `fqmul`, and `basemul` for products in Z_q[X]/(X^2 - zeta).
- `latticekem.poly`: operations on single polynomials. It covers
  compression to 128 or 160 bytes (`poly_compress`, `poly_decompress`),
  12-bit serialisation (`poly_to_bytes`, `poly_from_bytes`) and message
  encoding (`poly_from_msg`, `poly_to_msg`). It also provides `poly_to_mont`,
  `poly_reduce`, `poly_ntt`, `poly_invntt_tomont`, `poly_basemul_montgomery`,
  `poly_add` and `poly_sub`.
- `latticekem.polyvec`: the same operations for vectors of polynomials.
  Compression uses 10 or 11 bits per coefficient.
  `polyvec_basemul_acc_montgomery` accumulates the products of the first two
  polynomials of each vector.
- `latticekem.symmetric`: `Shake128Xof` for seed expansion in whole 168-byte
  blocks, `shake256_prf`, `hash_h` (SHA3-256), `hash_g` (SHA3-512) and `kdf`
  (SHAKE256, 32 bytes).
- `latticekem.sha2`: self-contained `sha256` and `sha512`.
- `latticekem.rng`: `aes256_ecb`, `ctr_drbg_update`, the AES-256 `CtrDrbg` and
  `SeedExpander` produce reproducible pseudo-random bytes. Requests they cannot
  satisfy raise `RngError`.
- `latticekem.verify`: `verify(a, b)` returns 0 when the inputs are equal and 1
  when they differ. `cmov(r, x, b)` returns `x` when `b` is 1 and `r` when `b`
  is 0.
- `latticekem.randombytes`: `randombytes(n)` returns `n` bytes from `os.urandom`.
- `latticekem.benchmark`: `median`, `average`, `format_results` and
  `print_results` summarise the intervals between successive timestamps.

Polynomials are sequences of 256 integers. Every function returns new lists or
bytes and leaves its arguments unchanged. A wrong length raises `ValueError`.

## Installation

```
pip install .
```

The `test` extra installs pytest and hypothesis.

## Example

```python
from latticekem.params import params_for
from latticekem.poly import poly_from_msg, poly_to_msg, poly_ntt, poly_invntt_tomont
from latticekem.symmetric import hash_h

p = params_for(3)
print(p.publickeybytes, p.secretkeybytes, p.ciphertextbytes)  # 1184 2400 1088

msg = hash_h(b"hello")
assert poly_to_msg(poly_from_msg(msg)) == msg

coeffs = poly_ntt(poly_from_msg(msg))
back = poly_invntt_tomont(coeffs)
```

## Deterministic randomness

```python
from latticekem.rng import CtrDrbg, SeedExpander

drbg = CtrDrbg(bytes(range(48)), None)
first = drbg.random_bytes(32)

expander = SeedExpander(bytes(32), bytes(8), 1024)
chunk = expander.read(100)
```

## What the package does not do

The package supplies the arithmetic, encoding, hashing and randomness layers
only. It has no functions for key-pair generation, encapsulation or
decapsulation. It has no key-exchange protocol and no AES-based variant of the
XOF and PRF. It does not generate matrices or sample centred-binomial noise. It
provides no command-line program.

## Running the tests

```
pytest
```