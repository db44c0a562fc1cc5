# lzhuffcrypt

A small file compressor. It first encodes the input with LZ77, using a 32 KiB
sliding window. It then Huffman-codes the result. The compressed bytes can also
be shifted by a numeric key, in the manner of a Caesar cipher.

## Installation

```
pip install .
```

## Command line

```
lzhuffcrypt COMMAND INPUT OUTPUT [KEY]
```

`KEY` is an integer and defaults to 0. It is taken modulo 256.

| Command              | Effect                                                  |
|----------------------|---------------------------------------------------------|
| `compress`           | LZ77 then Huffman; writes the code table and the data   |
| `compress_encrypt`   | as `compress`, and shifts the compressed bytes by KEY   |
| `decompress`         | reverses `compress`                                     |
| `decrypt_decompress` | reverses `compress_encrypt`                             |
| `encrypt`            | shifts every byte of the file up by KEY                 |
| `decrypt`            | shifts every byte of the file back down by KEY          |

Example:

```
lzhuffcrypt compress_encrypt notes.txt notes.lzh 42
lzhuffcrypt decrypt_decompress notes.lzh notes.out 42
```

The command checks its arguments and reports problems as follows:

- The wrong number of arguments prints `Wrong number of arguments`.
- An unknown command prints `Wrong Command`.
- In both of those cases the exit status is 0.
- A missing or empty input file, a non-numeric key, or malformed compressed
  data prints `error: ...` to standard error. The exit status is then 1.

## File format

A compressed file begins with one line that holds the Huffman code table. The
table lists 256 codes, separated by spaces. A byte value that never occurs is
written as `_`. After the codes comes the total number of encoded bits. The
packed bits follow that line. They are zero-padded to a whole byte.

The LZ77 stage writes text tokens of the form `<offset>_<length>_<next byte>_`.
When the last match runs to the end of the input, the final token ends in `00`
instead of a next byte.

## Library use

```python
from lzhuffcrypt import lz77, huffman_codec, cipher

data = b"abracadabra abracadabra"
tokens = lz77.compress(data)
keys, packed = huffman_codec.compress(tokens)
shifted = cipher.encrypt(7, packed)

restored = lz77.decompress(
    huffman_codec.decompress(keys, cipher.decrypt(7, shifted))
)
assert restored == data
```

The package has these modules:

- `lzhuffcrypt.lz77`: `compress` and `decompress` for the token stream.
- `lzhuffcrypt.huffman_codec`: `compress` returns `(keys, packed)`, and
  `decompress(keys, packed)` reverses it.
- `lzhuffcrypt.huffman_tree`: inspects the code tree through `Node`,
  `byte_frequencies`, `build_tree` and `huffman_codes`.
- `lzhuffcrypt.cipher`: `encrypt(key, data)` and `decrypt(key, data)`.
- `lzhuffcrypt.file_io`: `read(path)` and `write(path, parts)`.
- `lzhuffcrypt.cli`: `execute(input_path, output_path, command, key=0)` runs
  one command from Python. It raises `UnknownCommandError` for a name it does
  not recognise.

## Limitations

- Whole files are held in memory, and the LZ77 match search is slow on large
  inputs.
- `file_io.read` drops one trailing newline byte from every file it reads, and
  it rejects empty files. This covers compressed files too, so packed data
  whose last byte is `0x0A` does not decompress correctly.
- The byte shift is a Caesar cipher and gives no real protection.

## Running the tests

```
pip install .[test]
pytest
```