# rustdrills

Helpers that go with a set of small Rust exercises: coloured status lines for
the learner, a writer for the `rust-project.json` file that rust-analyzer
reads, and worked solutions to many of the exercises written as ordinary
Python functions and classes.

## Status lines

`rustdrills.ui` prints one-line messages to the terminal with `rich`:

    from rustdrills.ui import success, warn

    success("Successfully ran exercises/if/if1.rs")   # green, prefixed with ✅
    warn("Compiling of exercises/if/if2.rs failed!")  # red, prefixed with ⚠️

When the `NO_EMOJI` environment variable is set (`no_emoji()` returns True),
the prefixes are the plain characters `✓` and `!` instead.

## rust-analyzer project file

`rustdrills.project.RustAnalyzerProject` collects one `Crate` per exercise
file (edition `2021`, no dependencies, `cfg` set to `["test"]` so that
rust-analyzer also looks inside test blocks):

    from rustdrills.project import RustAnalyzerProject

    project = RustAnalyzerProject()
    project.get_sysroot_src()    # RUST_SRC_PATH, or asks `rustc --print sysroot`
    project.exercises_to_json()  # every file under ./exercises whose text after
                                 # the first dot is "rs"
    project.write_to_disk()      # compact JSON to ./rust-project.json

`get_sysroot_src` uses the `RUST_SRC_PATH` environment variable when it is
set; otherwise it runs `rustc`, prints the toolchain it found and points at
its `lib/rustlib/src/rust/library` directory. `add_path` adds a single file,
`to_json` returns the JSON text, and both `exercises_to_json` and
`write_to_disk` accept another root directory or output path.

## Worked solutions

The `rustdrills.solutions` package holds:

- `basics`: `calculate_price_of_apples`, `bigger`, `foo_if_fizz`, `is_even`,
  `sale_price`, `square`, `array_and_vec`, `vec_loop`, `vec_map`.
- `textops`: `transformer` with `Command` and `CommandKind` (upper-case, trim,
  append "bar" a number of times), `current_favorite_color`,
  `is_a_color_word`, `trim_me`, `compose_me`, `replace_me`.
- `records`: `ReportCard` (numeric or letter grades), `Order` and
  `create_order_template`, `Package`, and a `Machine` that processes
  `ChangeColor`, `Quit`, `Echo` and `Move` messages.
- `concurrency`: `run_timed_workers`, `count_jobs` with a locked `JobStatus`,
  and `send_queue`, which yields the values of a `Queue` sent from two threads.
- `errors`: `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`
  with `CreationError`, and `parse_pos_nonzero`, which raises
  `ParsePosNonzeroError`.
- `iterators`: `capitalize_first`, `capitalize_words_vector`,
  `capitalize_words_string`, `divide` with `NotDivisibleError` and
  `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial`, and
  the `Progress` counters `count_for`, `count_iterator`,
  `count_collection_for`, `count_collection_iterator`.
- `baskets`: `Fruit`, `default_basket`, `fill_basket`, and
  `build_scores_table`, which returns a `Team` per name.
- `pointers`: the cons list `Cons`/`Nil` with `create_empty_list` and
  `create_non_empty_list`, the copy-on-write `CowList` with `abs_all`, `Sun`
  and `Planet`, and `offset_sums`.
- `traits`: `append_bar`, `Licensed` with `SomeSoftware` and `OtherSoftware`,
  `compare_license_types`, and `some_func` with `SomeStruct` and `OtherStruct`.

Some examples:

    from rustdrills.solutions.basics import calculate_price_of_apples, foo_if_fizz
    from rustdrills.solutions.records import ReportCard
    from rustdrills.solutions.textops import Command, CommandKind, transformer
    from rustdrills.solutions.traits import append_bar

    calculate_price_of_apples(41)   # 41
    foo_if_fizz("fuzz")             # "bar"
    transformer([("foo", Command(CommandKind.APPEND, 1))])   # ["foobar"]
    ReportCard("A+", "Gary Plotter", 11).print()
    # "Gary Plotter (11) - achieved a grade of A+"
    append_bar("Foo")               # "FooBar"

## What this package does not do

There is no command-line program. The package does not compile, test or lint
exercises, does not watch files for changes, does not read an exercise list or
track which exercises are done, and does not show hints or reset exercises.
It offers only the status lines, the rust-analyzer project writer and the
worked solutions described above.