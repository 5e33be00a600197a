# tsxlate

`tsxlate` sits between your editor and a TypeScript language server. It
forwards every message unchanged except `textDocument/publishDiagnostics`
notifications. In those, it rewrites the message of each known TypeScript
error into a plainer explanation.

Here is one diagnostic with `--append`:

```
Property 'foo' does not exist on type 'Bar'.  ● You're trying to access 'foo' on an object that doesn't contain it.
```

## Installation

```
pip install .
```

## Usage

Set your editor's TypeScript language-server command to `tsxlate` in place of
the server itself:

```
tsxlate [OPTIONS] [LSP_COMMAND] [LSP_ARGS...]
```

Options:

- `--append`: keep the original message and add the explanation after it,
  separated by `  ● `. Without this option the explanation replaces the
  original message and is prefixed with `● `.
- `--help`, `-h`: print usage to standard error and exit.

If you give no language-server command, `tsxlate` runs `vtsls --stdio`. Any
other server can be wrapped like this:

```
tsxlate typescript-language-server --stdio
tsxlate --append vtsls --stdio
```

The proxy speaks LSP on its standard input and output. The wrapped server's
standard error goes straight through to the proxy's standard error. The relay
stops as soon as either side reaches end of input. If the server cannot be
started or a message is malformed, `tsxlate` prints the error and exits with
status 1.

Translated diagnostic notifications are written back as compact JSON with
their keys sorted; all other messages are forwarded byte for byte.

## How translation works

`tsxlate` takes the error code from the diagnostic's `code` field. If that
field is missing or is not an integer, it looks for a `TS1234`-style code in
the message text. If the code has a translation, the original message is
matched against the known wording, and any names or types it captured are put
into the explanation. If the wording does not match, the explanation is used
as it stands. Codes without a translation are passed through unchanged.

## Library use

The translation functions can also be called directly:

```python
from tsxlate.translator import TranslationMode, translate_message

translate_message(
    "Type 'string' is not assignable to type 'number'.",
    2322,
    TranslationMode.REPLACE,
)
# "● I was expecting a type matching 'number' but instead you passed 'string'."
```

Other modules:

- `tsxlate.errors`: the `ERRORS` catalogue of `ErrorInfo` entries, and the
  helpers `pattern_to_regex`, `extract_params` and `substitute_params`.
- `tsxlate.jsonrpc`: `read_message` and `write_message` for
  `Content-Length` framed messages over asyncio streams.
- `tsxlate.proxy`: `run_proxy`, which relays between two pairs of streams, and
  `transform_if_diagnostics`, which translates one message body.

## Running the tests

```
pip install .[test]
pytest
```