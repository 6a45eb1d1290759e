# typecrab

A minimalistic, customizable typing test for the terminal.

Type through randomly chosen words, a quote, or free text in zen mode, then
see your speed, accuracy, consistency and the keys you mistyped.

## Installation

```
pip install .
```

The interactive test puts the terminal into raw mode with `termios`, so it
runs on POSIX systems (Linux, macOS). The library parts work anywhere.

## Resources

Word lists, quotes and color schemes are read from a `resources` directory
in the current working directory:

- `resources/words/<lang>.txt` — whitespace-separated words
- `resources/quotes/<lang>/*.txt` — quote files; one is picked at random
- `resources/schemes/<name>.css` — CSS variables such as
  `--orange-color: #fd971f;`

The package itself ships none of these files; you provide them. The color
scheme is loaded before anything else, so the command fails unless
`resources/schemes/monokai.css` exists or you pass `--scheme` or
`--scheme-file`.

Recognised scheme variables are `red-color`, `green-color`, `yellow-color`,
`orange-color`, `white-color`, `dark-color` and `light-color`, each a
`#rrggbb` value. Missing variables fall back to standard terminal colors;
values that are not `#rrggbb` are drawn white.

## Usage

Start a words test with the defaults (English, 25 words):

```
typecrab
```

Modes (at most one):

- `-w`, `--words` — random words from a word list (the default)
- `-q`, `--quote` — type a random quote
- `-z`, `--zen` — free typing with no target text and no results screen

Options:

- `-p`, `--punctuation` — add punctuation to the words
- `-n`, `--numbers` — mix numbers into the words
- `--strict` — do not allow going back to completed words
- `--death` — end the test on the first mistake
- `-l`, `--language <lang>` — word or quote language (default `en`)
- `--language-file <path>` — use your own text file instead of a language
- `-s`, `--scheme <name>` — color scheme (default `monokai`)
- `--scheme-file <path>` — load colors from your own CSS file
- `-c`, `--count <n>` — number of words (default 25)
- `-t`, `--time <sec>` — time limit in seconds
- `--list-languages` — print the available languages and exit
- `--list-schemes` — print the available color schemes and exit
- `-V`, `--version` — print the version and exit

Examples:

```
typecrab --list-languages
typecrab -p -n -c 50
typecrab -q -l en
typecrab -t 30 --death
```

Options are checked before the test starts. A count of 0 becomes 30 and a
time limit of 0 is disabled. Quote mode ignores count, punctuation and
numbers; zen mode also ignores `--strict`, `--death` and the time limit. An
unknown language falls back to English words. Combining `--language-file`
with `--zen` is an error. Such notes appear in the status bar for the first
three seconds of the test.

Press any key on the start screen to begin. `Esc` or `Ctrl+C` ends the test
early. The status bar shows the seconds left when a time limit is set,
otherwise the word position. After a words or quote test the results screen
shows wpm, raw wpm, accuracy, consistency, a character breakdown
(correct/incorrect/extra/missed), a chart over time and a keyboard with
mistyped keys in red.

## Library use

```python
from typecrab.config import Config, validate_config
from typecrab.generator import generate_content
from typecrab.session import TypingTest
from typecrab.results import Key, process_results

config = validate_config(Config()).payload
words = generate_content(config).payload
test = TypingTest(words, config)

for ch in "hello":
    test.handle_key(Key.char(ch))
test.handle_key(Key.SPACE)

results = process_results(test.raw_results()).payload
print(results.wpm, results.accuracy, results.key_presses)
```

Core API calls return a `typecrab.response.Response` holding a `payload`
and an optional `(Level, text)` message. `generate_content` takes an
optional `root` for the resources directory and an optional
`random.Random`; `TypingTest` takes an optional clock function.

Other modules:

- `typecrab.languages` — `words_languages`, `quotes_languages`,
  `quote_files`, `scheme_names`, `language_from_str`
- `typecrab.listing` — `list_languages`, `list_schemes`
- `typecrab.scheme` — `load_scheme_file`, `parse_css_variables`,
  `parse_hex_color`, `Scheme`, `Color`, `Style`, `Span`
- `typecrab.startview`, `typecrab.testview`, `typecrab.resultview` — build
  the lines of each screen and render them as terminal rows
- `typecrab.cli` — `parse_args`, `build_config`, `status_text`, `main`

## What it does not do

There is no web or graphical interface, no stored settings or saved
configurations, and no history of past results; each run is configured
entirely from the command line and forgotten when it ends.