# nomadpack

Building blocks for command-line tools that work with packs:

- **Flag sets** (`nomadpack.flagsets`, `nomadpack.flagvalues`,
  `nomadpack.flagcollections`): flags arranged into named groups.
  POSIX-style flags (`--name value`, `-n value`) are accepted, and so are
  single-dash long flags (`-name value`). Single-dash flags must come before
  positional arguments. Flags can take their initial values from environment
  variables, and `Sets.help()` builds help text for each group. The flag
  types are `BoolVar`, `IntVar`, `Int64Var`, `UintVar`, `Uint64Var`,
  `Float64Var`, `DurationVar`, `EnumVar`, `EnumSingleVar`, `StringSliceVar`
  and `StringMapVar`.
- **Parsing helpers** (`nomadpack.flagenv`): `parse_bool`, `parse_int`,
  `parse_uint`, `parse_duration`, `format_duration`, `format_float`,
  `wrap_with_padding`, and `env_default`, `env_bool_default` and
  `env_duration_default`.
- **Spinner** (`nomadpack.spinner`, `nomadpack.charsets`): a terminal
  progress indicator that runs on a background thread. It supports colours
  and a numbered collection of character sets (`char_set(index)`).
- **Template helpers** (`nomadpack.templatefuncs`): `to_string_list`,
  `go_quote` and `file_contents`.
- **Filesystem helpers**:
  - `nomadpack.filesystem` provides `copy_file`, `copy_dir` and
    `maybe_create_destination_dir`.
  - `nomadpack.walk` provides `walk` and `read_dir_names`. `walk` is a
    directory walk that follows symlinks and honours `SkipDir`.
- **Logging** (`nomadpack.logger`): the `Logger` protocol, plus `FmtLogger`,
  which prints to standard output, and `TestLogger`, which hands messages to
  a callable.
- **Other helpers** (`nomadpack.helpers`): `title`, and `with_interrupt`,
  which gives an event that is set on SIGINT.

## Installation

```
pip install .
```

## Example

Each call to `Set.add` registers a flag declaration and returns the flag's
value object:

```python
from nomadpack.flagsets import Sets
from nomadpack.flagvalues import IntVar

sets = Sets()
ops = sets.new_set("Operation Options")
count = ops.add(IntVar(name="count", usage="How many to run.", default=1))

sets.parse(["--count", "3", "example"])
print(count.value)   # 3
print(sets.args())   # ['example']
print(sets.help())
```

`Sets.parse` raises `FlagError` when the arguments cannot be parsed.

A spinner can be used as a context manager:

```python
from nomadpack.charsets import char_set
from nomadpack.spinner import Spinner

with Spinner(char_set(9), 0.1, suffix=" working"):
    ...
```

## What this package does not do

This package is a library of parts. It does not include any of the
following:

- a command-line program;
- loading or validating packs;
- parsing variable files;
- rendering templates;
- talking to a cluster API.

## Running the tests

```
pip install .[test]
pytest
```