# aatargs

A small library that checks `--option value` command lines against a table of
typed option descriptions. Each option knows its kind, its default and the
values it accepts. The parser fills in the values it is given and raises an
error at the first problem it finds.

## Option kinds

Options are built with the class methods of `ArgOption` in `aatargs.options`:

- `ArgOption.boolean(name, default)`: a flag that takes no value.
- `ArgOption.int_range(name, default, minimum, maximum, strict=False)`: an
  integer in `[minimum..maximum]`. The integer must fit a signed 32-bit int.
- `ArgOption.int_set(name, choices, default_index=0, strict=False)`: an
  integer from a fixed set. If `default_index` is out of range, the first
  choice becomes the default.
- `ArgOption.double_range(...)` and `ArgOption.double_set(...)`: the same as
  the two above, for floating-point values.
- `ArgOption.string(name, default="")`: any string.
- `ArgOption.string_set(name, choices, default_index=0, strict=False)`: a
  string from a fixed set.
- `ArgOption.ipaddr(name, default="", strict=False)`: a dotted IPv4 address.
  An empty default means `0.0.0.0`.

The `strict` flag decides what happens to a value that is out of range, not
in the set, or not a valid address:

- With `strict=False`, the option falls back to its default.
- With `strict=True`, the value is an error.

A value that is not a number at all is an error for every numeric option.
Errors are raised as `ArgsError`, a subclass of `ValueError`. Its message is
in Chinese and describes the option's type and the values it allows.

After parsing, each option has these attributes:

- `existed`: whether the option was given.
- `value`: the option's current value.
- `ip_value`: the 32-bit integer form of an address, for address options.

Each option also has these methods:

- `type_name()`: the name of the option's kind.
- `range_text()`: the allowed range or set as text, with doubles shown to six
  decimals.
- `range_text_double()`: the same in short form, for double options.
- `str_ipaddr()`: the address as dotted text, for address options.

## Parsing

```python
from aatargs.options import ArgOption, ArgsError
from aatargs.parser import parse_args, format_table

options = [
    ArgOption.boolean("--verbose", False),
    ArgOption.int_range("--count", 10, 1, 65535),
    ArgOption.string_set("--hash", ["md5", "sha1", "sha256"], 2, strict=True),
    ArgOption.ipaddr("--host", "192.168.80.230", strict=True),
]

try:
    index = parse_args(["prog", "--count", "15", "--hash", "md5"], options)
except ArgsError as exc:
    print(exc)
else:
    print(format_table(options))
```

`parse_args(argv, options, follow_up_args=False)` changes the options in
place. `argv[0]` is the program name and is skipped. The function returns the
index of the first entry it did not use.

When `follow_up_args` is false, every entry must be a known `--` option or
its value. When it is true, parsing stops at the first entry that does not
start with `--`, and the remaining entries are left to the caller.

`parse_args` raises `ArgsError` in these cases:

- an option is not known;
- an option is repeated;
- an option's value is missing, or is itself the name of an option;
- a value is rejected as described above.

`format_table(options)` returns a text table. For each option it shows the
name, type, default, whether the option was given, the value, and the range
or set.

The module `aatargs.options` also provides these helpers, which can be used
on their own:

- `is_strict_int`
- `is_strict_double`
- `is_valid_ipv4`
- `ipv4_to_int`
- `int_to_ipv4`

## Demo

The package installs a demonstration command:

```
aatargs-demo --intdef 123 --strsetdef md5 --ipdef 1.1.1.1
```

The command parses its arguments against the sample table returned by
`aatargs.parser.demo_options()`. That table has one option of every kind. The
command then prints the result table and a short report of each value.

If parsing fails, the command prints the error message and exits with status
1.

## What it does not do

The package does not generate help or usage text.

It does not support short options, `--name=value` syntax, or options that
take more than one value.

It does not interpret positional arguments. They are only located, through
the index that `parse_args` returns.