# rustlings

Worked solutions to a set of small Rust learning exercises, written as plain
Python functions and classes, together with two helpers for working on the
exercises: one that writes a `rust-project.json` file for rust-analyzer, and
one that prints coloured status lines in the terminal.

## Requirements

- Python 3.11 or later
- `rich` (installed automatically)
- `rustc` on your `PATH`, only if you want `RustAnalyzerProject.get_sysroot_src`
  to ask it for the toolchain location

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Exercise solutions

The `rustlings.exercises` sub-package holds one module per topic:

| Module | Contents |
| --- | --- |
| `quizzes` | `calculate_price_of_apples`, `transformer` with `Command` / `CommandKind`, `ReportCard` |
| `control` | `sale_price`, `is_even`, `square` |
| `branches` | `bigger`, `foo_if_fizz`, `animal_habitat` |
| `strings` | `current_favorite_color`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `structs` | `Order`, `create_order_template`, `Package` |
| `enums` | message classes `ChangeColor`, `Echo`, `Move`, `Quit`, `Point`, and `MachineState.process` |
| `options` | `maybe_icecream`, `drain_present` |
| `vecs` | `array_and_vec`, `vec_loop`, `vec_map`, `Wrapper` |
| `hashmaps` | `default_basket`, `Fruit`, `fill_basket`, `Team`, `build_scores_table` |
| `errors` | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `parse_pos_nonzero` and their errors |
| `conversions` | `Person.default`, `Person.from_text`, `Person.parse`, `average`, `byte_counter`, `char_counter`, `num_sq` |
| `colors` | `Color.from_components`, `Color.from_sequence`, errors `BadLength` and `IntConversion` |
| `iterators` | `capitalize_first`, `divide`, `result_with_list`, `list_of_results`, `factorial`, progress counters |
| `traits` | `append_bar`, `Licensed`, `compare_license_types`, `some_func` |
| `smart_pointers` | `abs_all`, `Cons`, `create_empty_list`, `create_non_empty_list` |

Where an exercise reports a failure, the function raises an exception:

```python
from rustlings.exercises.conversions import Person, ParsePersonError
from rustlings.exercises.colors import Color, IntConversion
from rustlings.exercises.iterators import divide, NotDivisibleError

Person.parse("Mark,20")          # Person(name='Mark', age=20)
Person.from_text("Mark,twenty")  # Person(name='John', age=30), the default

try:
    Person.parse("John,32,")
except ParsePersonError as err:
    print(err.kind)              # ParsePersonErrorKind.BAD_LEN

Color.from_sequence([183, 65, 14])  # Color(red=183, green=65, blue=14)

try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)  # 81 6
```

## rust-analyzer project file

`rustlings.project.RustAnalyzerProject` collects every `.rs` file below a
directory as a standalone crate (edition 2021, `cfg` set to `test`) and writes
them to `rust-project.json`:

```python
from rustlings.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json()        # defaults to ./exercises
project.write_to_disk()            # defaults to ./rust-project.json
```

`to_json()` returns the same JSON as a string without writing it.

## Status lines

`rustlings.ui.warn(message)` prints a red line and `rustlings.ui.success(message)`
a green one, each led by a symbol. When the `NO_EMOJI` environment variable is
set (`rustlings.ui.no_emoji()` returns `True`), plain-text symbols are used.

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile or test exercise files, run them, track which exercises are done, watch
files for changes, show hints or reset exercises. It provides only the
solution modules and the two helpers described above.